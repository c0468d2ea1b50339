"""Authentication endpoints."""

from typing import Any, Dict

import structlog
from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_user_service
from app.schemas.auth import LoginRequest, TokenResponse
from app.services.user_service import UserService
from app.utils.helpers import serialize

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("")
async def get_current_user_info(current_user: Dict[str, Any] = Depends(get_current_user)):
    """Get the authenticated user (password excluded)."""
    return serialize(current_user)


@router.post("", response_model=TokenResponse)
async def login(request: LoginRequest, users: UserService = Depends(get_user_service)):
    """Login with email and password."""
    token = await users.authenticate(request.email, request.password)
    logger.info("user_logged_in", email=request.email)
    return TokenResponse(token=token)
