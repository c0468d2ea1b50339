"""
Posts API
Feed posts with likes and comments; every endpoint requires a token
"""

from typing import Any, Dict

import structlog
from bson import ObjectId
from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_current_user_id, get_post_service
from app.schemas.post import CommentCreate, PostCreate
from app.services.post_service import PostService
from app.utils.helpers import serialize

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("")
async def create_post(
    request: PostCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    posts: PostService = Depends(get_post_service),
):
    """Create a post; author name and avatar are copied from the user."""
    post = await posts.create(current_user, request.text)
    logger.info("post_created", post_id=str(post["_id"]), user_id=str(current_user["_id"]))
    return serialize(post)


@router.get("")
async def list_posts(
    user_id: ObjectId = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    """List all posts, newest first."""
    return serialize(await posts.list_newest_first())


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    user_id: ObjectId = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    return serialize(await posts.get(post_id))


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    user_id: ObjectId = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    """Delete a post. Only its author may do so."""
    await posts.delete(post_id, user_id)
    return {"msg": "Post removed"}


@router.put("/like/{post_id}")
async def like_post(
    post_id: str,
    user_id: ObjectId = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    return serialize(await posts.like(post_id, user_id))


@router.put("/unlike/{post_id}")
async def unlike_post(
    post_id: str,
    user_id: ObjectId = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    return serialize(await posts.unlike(post_id, user_id))


@router.post("/comment/{post_id}")
async def add_comment(
    post_id: str,
    request: CommentCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    posts: PostService = Depends(get_post_service),
):
    """Comment on a post; the newest comment comes first."""
    return serialize(await posts.add_comment(post_id, current_user, request.text))


@router.delete("/comment/{post_id}/{comment_id}")
async def delete_comment(
    post_id: str,
    comment_id: str,
    user_id: ObjectId = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    """Delete one of your own comments."""
    return serialize(await posts.delete_comment(post_id, comment_id, user_id))
