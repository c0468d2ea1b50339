"""Profile document and its embedded experience/education entries."""

from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId

from app.utils.helpers import to_datetime, utcnow

# Fields joined in from the owning user
USER_JOIN_FIELDS = ("name", "avatar")


def new_profile(user_id: ObjectId, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Build a profile document; empty history lists, creation date set."""
    profile = {
        "user": user_id,
        "social": {},
        "experience": [],
        "education": [],
        "date": utcnow(),
    }
    profile.update(fields)
    return profile


def new_history_entry(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Build an experience or education sub-document with its own id."""
    entry = {"_id": ObjectId()}
    for key, value in fields.items():
        entry[key] = to_datetime(value) if key in ("from", "to") else value
    return entry


def prepend(entries: Optional[List[Dict[str, Any]]], entry: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Most recent first."""
    return [entry] + list(entries or [])


def remove_by_id(entries: Optional[List[Dict[str, Any]]], entry_id: Optional[ObjectId]) -> List[Dict[str, Any]]:
    """Drop the entry with the given id; unknown ids leave the list unchanged."""
    return [entry for entry in entries or [] if entry.get("_id") != entry_id]


def join_user(profile: Dict[str, Any], users: Dict[ObjectId, Dict[str, Any]]) -> Dict[str, Any]:
    """Replace the ``user`` foreign key with ``{_id, name, avatar}``."""
    joined = dict(profile)
    user_id = profile.get("user")
    user = users.get(user_id)
    if user is None:
        joined["user"] = {"_id": user_id}
    else:
        joined["user"] = {"_id": user_id, **{field: user.get(field) for field in USER_JOIN_FIELDS}}
    return joined


def user_ids(profiles: Iterable[Dict[str, Any]]) -> List[ObjectId]:
    return list({profile["user"] for profile in profiles if profile.get("user") is not None})
