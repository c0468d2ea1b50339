"""API routes."""

from fastapi import APIRouter

from app.api import auth, posts, profile, users

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
api_router.include_router(posts.router, prefix="/posts", tags=["Posts"])
