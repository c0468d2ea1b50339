"""Posts feed: posts, likes and comments."""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from app.core.exceptions import AuthorizationError, BadRequestError, NotFoundError
from app.db.session import POSTS
from app.models import post as post_model
from app.utils.helpers import parse_object_id

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"
COMMENT_NOT_FOUND = "Comment does not exist"
NOT_AUTHORIZED = "User not authorized"


class PostService:
    """Operations on the ``posts`` collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[POSTS]

    async def create(self, author: Dict[str, Any], text: str) -> Dict[str, Any]:
        post = post_model.new_post(author, text)
        result = await self.collection.insert_one(post)
        post["_id"] = result.inserted_id
        return post

    async def list_newest_first(self) -> List[Dict[str, Any]]:
        cursor = self.collection.find({}, sort=[("date", DESCENDING), ("_id", DESCENDING)])
        return await cursor.to_list(length=None)

    async def get(self, post_id: str) -> Dict[str, Any]:
        """Fetch a post; malformed ids are reported as missing."""
        oid = parse_object_id(post_id)
        post = await self.collection.find_one({"_id": oid}) if oid is not None else None
        if post is None:
            raise NotFoundError(POST_NOT_FOUND)
        return post

    async def delete(self, post_id: str, user_id: ObjectId) -> None:
        post = await self.get(post_id)
        if post.get("user") != user_id:
            raise AuthorizationError(NOT_AUTHORIZED)
        await self.collection.delete_one({"_id": post["_id"]})
        logger.info(f"Post {post['_id']} removed by its author")

    async def _save_field(self, post: Dict[str, Any], field: str, value: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        post[field] = value
        await self.collection.update_one({"_id": post["_id"]}, {"$set": {field: value}})
        return value

    async def like(self, post_id: str, user_id: ObjectId) -> List[Dict[str, Any]]:
        post = await self.get(post_id)
        if post_model.has_liked(post, user_id):
            raise BadRequestError("Post already liked")
        likes = [post_model.new_like(user_id)] + list(post.get("likes") or [])
        return await self._save_field(post, "likes", likes)

    async def unlike(self, post_id: str, user_id: ObjectId) -> List[Dict[str, Any]]:
        post = await self.get(post_id)
        if not post_model.has_liked(post, user_id):
            raise BadRequestError("Post has not yet been liked")
        return await self._save_field(post, "likes", post_model.without_like(post.get("likes"), user_id))

    async def add_comment(self, post_id: str, author: Dict[str, Any], text: str) -> List[Dict[str, Any]]:
        post = await self.get(post_id)
        comments = [post_model.new_comment(author, text)] + list(post.get("comments") or [])
        return await self._save_field(post, "comments", comments)

    async def delete_comment(self, post_id: str, comment_id: str, user_id: ObjectId) -> List[Dict[str, Any]]:
        post = await self.get(post_id)
        comment = post_model.find_comment(post, parse_object_id(comment_id))
        if comment is None:
            raise NotFoundError(COMMENT_NOT_FOUND)
        if comment.get("user") != user_id:
            raise AuthorizationError(NOT_AUTHORIZED)
        return await self._save_field(
            post, "comments", post_model.without_comment(post.get("comments"), comment["_id"])
        )
