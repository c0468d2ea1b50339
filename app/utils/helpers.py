"""Helper utilities."""

import hashlib
from datetime import date, datetime, time, timezone
from typing import Any, List, Optional
from urllib.parse import urlencode

from bson import ObjectId
from fastapi.encoders import jsonable_encoder

GRAVATAR_URL = "//www.gravatar.com/avatar/"


def utcnow() -> datetime:
    """Current UTC time, truncated to the millisecond precision BSON stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Build the Gravatar avatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode()).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_URL}{digest}?{query}"


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return an ObjectId for a valid id, None otherwise."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def to_datetime(value: Optional[date]) -> Optional[datetime]:
    """BSON has no date type; store calendar dates as midnight UTC."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def split_skills(skills: Any) -> List[str]:
    """Turn a comma-separated string (or a list) into trimmed skill names."""
    if isinstance(skills, str):
        items = skills.split(",")
    else:
        items = list(skills or [])
    return [str(skill).strip() for skill in items if str(skill).strip()]


def serialize(document: Any) -> Any:
    """Make a MongoDB document JSON-safe."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})
