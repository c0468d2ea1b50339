"""Post document with embedded likes and comments."""

from typing import Any, Dict, List, Optional

from bson import ObjectId

from app.utils.helpers import utcnow


def _author_snapshot(user: Dict[str, Any]) -> Dict[str, Any]:
    # Copied at creation time, not kept in sync with later profile edits
    return {"name": user.get("name"), "avatar": user.get("avatar")}


def new_post(user: Dict[str, Any], text: str) -> Dict[str, Any]:
    return {
        "user": user["_id"],
        "text": text,
        **_author_snapshot(user),
        "likes": [],
        "comments": [],
        "date": utcnow(),
    }


def new_like(user_id: ObjectId) -> Dict[str, Any]:
    return {"_id": ObjectId(), "user": user_id}


def new_comment(user: Dict[str, Any], text: str) -> Dict[str, Any]:
    return {
        "_id": ObjectId(),
        "user": user["_id"],
        "text": text,
        **_author_snapshot(user),
        "date": utcnow(),
    }


def has_liked(post: Dict[str, Any], user_id: ObjectId) -> bool:
    return any(like.get("user") == user_id for like in post.get("likes") or [])


def without_like(likes: Optional[List[Dict[str, Any]]], user_id: ObjectId) -> List[Dict[str, Any]]:
    """Remove the like belonging to ``user_id``."""
    return [like for like in likes or [] if like.get("user") != user_id]


def find_comment(post: Dict[str, Any], comment_id: Optional[ObjectId]) -> Optional[Dict[str, Any]]:
    if comment_id is None:
        return None
    return next(
        (comment for comment in post.get("comments") or [] if comment.get("_id") == comment_id),
        None,
    )


def without_comment(comments: Optional[List[Dict[str, Any]]], comment_id: ObjectId) -> List[Dict[str, Any]]:
    """Remove exactly the comment with ``comment_id``."""
    return [comment for comment in comments or [] if comment.get("_id") != comment_id]
