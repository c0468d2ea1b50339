"""
Profile API
Developer profiles with experience, education and GitHub repositories
"""

import structlog
from bson import ObjectId
from fastapi import APIRouter, Depends

from app.api.deps import get_current_user_id, get_github_service, get_profile_service
from app.schemas.profile import EducationRequest, ExperienceRequest, ProfileRequest
from app.services.github_service import GitHubService
from app.services.profile_service import ProfileService
from app.utils.helpers import serialize

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/me")
async def get_my_profile(
    user_id: ObjectId = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Get the authenticated user's profile

    **Auth**: JWT required
    """
    return serialize(await profiles.get_own(user_id))


@router.post("")
async def create_or_update_profile(
    request: ProfileRequest,
    user_id: ObjectId = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Create or update the authenticated user's profile

    **Auth**: JWT required

    Only the fields present in the body are written; `skills` is a
    comma-separated list.
    """
    profile = await profiles.upsert(user_id, request)
    logger.info("profile_saved", user_id=str(user_id))
    return serialize(profile)


@router.get("")
async def list_profiles(profiles: ProfileService = Depends(get_profile_service)):
    """
    List all profiles

    **Auth**: Public
    """
    return serialize(await profiles.list_all())


@router.get("/user/{user_id}")
async def get_profile_by_user(user_id: str, profiles: ProfileService = Depends(get_profile_service)):
    """
    Get a profile by its owner's user id

    **Auth**: Public
    """
    return serialize(await profiles.get_by_user(user_id))


@router.delete("")
async def delete_account(
    user_id: ObjectId = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Delete the authenticated user's profile and account

    **Auth**: JWT required
    """
    await profiles.delete_account(user_id)
    logger.info("account_deleted", user_id=str(user_id))
    return {"msg": "User deleted"}


@router.put("/experience")
async def add_experience(
    request: ExperienceRequest,
    user_id: ObjectId = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Add an experience entry (most recent first)

    **Auth**: JWT required
    """
    return serialize(await profiles.add_experience(user_id, request))


@router.delete("/experience/{exp_id}")
async def delete_experience(
    exp_id: str,
    user_id: ObjectId = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Remove an experience entry by id

    **Auth**: JWT required
    """
    return serialize(await profiles.remove_experience(user_id, exp_id))


@router.put("/education")
async def add_education(
    request: EducationRequest,
    user_id: ObjectId = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Add an education entry (most recent first)

    **Auth**: JWT required
    """
    return serialize(await profiles.add_education(user_id, request))


@router.delete("/education/{edu_id}")
async def delete_education(
    edu_id: str,
    user_id: ObjectId = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """
    Remove an education entry by id

    **Auth**: JWT required
    """
    return serialize(await profiles.remove_education(user_id, edu_id))


@router.get("/github/{username}")
async def get_github_repos(username: str, github: GitHubService = Depends(get_github_service)):
    """
    Get a user's latest GitHub repositories (at most 5, oldest first)

    **Auth**: Public
    """
    return await github.get_repos(username)
