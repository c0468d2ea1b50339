"""User registration endpoint."""

import structlog
from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.schemas.auth import RegisterRequest, TokenResponse
from app.services.user_service import UserService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=TokenResponse)
async def register(request: RegisterRequest, users: UserService = Depends(get_user_service)):
    """
    Register a user and return a signed token

    **Auth**: Public
    """
    token = await users.register(request.name, request.email, request.password)
    logger.info("user_registered", email=request.email)
    return TokenResponse(token=token)
