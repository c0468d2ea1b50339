"""
API Dependencies
Common dependencies for API endpoints (authentication, services)
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.exceptions import AuthenticationError
from app.core.security import TOKEN_NOT_VALID, decode_token
from app.db.session import get_db
from app.services.github_service import GitHubService
from app.services.post_service import PostService
from app.services.profile_service import ProfileService
from app.services.user_service import UserService
from app.utils.helpers import parse_object_id

# Token header sent by the web client; a standard bearer header also works
token_header = APIKeyHeader(name="x-auth-token", auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    token: Optional[str] = Depends(token_header),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> ObjectId:
    """
    Verify the request token and return the authenticated user's id
    """
    if not token and credentials is not None:
        token = credentials.credentials
    if not token:
        raise AuthenticationError("No token, authorization denied")

    user_id = parse_object_id(decode_token(token))
    if user_id is None:
        raise AuthenticationError(TOKEN_NOT_VALID)
    return user_id


def get_user_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> UserService:
    return UserService(db)


def get_profile_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


def get_post_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> PostService:
    return PostService(db)


def get_github_service() -> GitHubService:
    return GitHubService()


async def get_current_user(
    user_id: ObjectId = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """
    Load the authenticated user's document (password excluded)
    """
    return await users.get_public_or_404(user_id)
