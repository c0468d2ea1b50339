"""
Profile Service
Create/update, lookup and deletion of profiles plus their experience and
education history. Every mutation is a read-modify-write on one document.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.core.exceptions import NotFoundError
from app.db.session import PROFILES, USERS
from app.models import profile as profile_model
from app.schemas.profile import EducationRequest, ExperienceRequest, ProfileRequest
from app.utils.helpers import parse_object_id, split_skills

logger = logging.getLogger(__name__)

NO_PROFILE = "There is no profile for this user"
PROFILE_NOT_FOUND = "Profile not found"


class ProfileService:
    """Operations on the ``profiles`` collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.profiles = db[PROFILES]
        self.users = db[USERS]

    async def _join_users(self, profiles: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Attach name/avatar of each owning user."""
        ids = profile_model.user_ids(profiles)
        users = {}
        if ids:
            projection = {field: 1 for field in profile_model.USER_JOIN_FIELDS}
            async for user in self.users.find({"_id": {"$in": ids}}, projection):
                users[user["_id"]] = user
        return [profile_model.join_user(profile, users) for profile in profiles]

    async def _join_user(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        return (await self._join_users([profile]))[0]

    async def _find_own(self, user_id: ObjectId) -> Dict[str, Any]:
        profile = await self.profiles.find_one({"user": user_id})
        if profile is None:
            raise NotFoundError(NO_PROFILE, status_code=400)
        return profile

    async def get_own(self, user_id: ObjectId) -> Dict[str, Any]:
        return await self._join_user(await self._find_own(user_id))

    async def list_all(self) -> List[Dict[str, Any]]:
        profiles = await self.profiles.find().to_list(length=None)
        return await self._join_users(profiles)

    async def get_by_user(self, user_id: Any) -> Dict[str, Any]:
        """Public lookup; malformed ids are reported the same as missing profiles."""
        oid = parse_object_id(user_id)
        profile = await self.profiles.find_one({"user": oid}) if oid is not None else None
        if profile is None:
            raise NotFoundError(PROFILE_NOT_FOUND, status_code=400)
        return await self._join_user(profile)

    async def upsert(self, user_id: ObjectId, request: ProfileRequest) -> Dict[str, Any]:
        """
        Create the profile or merge the supplied fields into the existing one.

        Absent fields are left untouched on update and omitted on create. This is a
        find-then-write, not an atomic upsert.
        """
        fields = request.profile_fields()
        fields["skills"] = split_skills(request.skills)
        social = request.social_fields()

        existing = await self.profiles.find_one({"user": user_id}, {"_id": 1})
        if existing:
            update = dict(fields)
            update.update({f"social.{network}": url for network, url in social.items()})
            profile = await self.profiles.find_one_and_update(
                {"user": user_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
            logger.info(f"Updated profile for user {user_id}")
        else:
            profile = profile_model.new_profile(user_id, {**fields, "social": social})
            result = await self.profiles.insert_one(profile)
            profile["_id"] = result.inserted_id
            logger.info(f"Created profile for user {user_id}")

        return await self._join_user(profile)

    async def delete_account(self, user_id: ObjectId) -> None:
        """Remove the profile, then the user. Posts by the user are kept."""
        await self.profiles.delete_one({"user": user_id})
        await self.users.delete_one({"_id": user_id})
        logger.info(f"Deleted user {user_id}")

    async def _add_entry(self, user_id: ObjectId, field: str, entry_fields: Dict[str, Any]) -> Dict[str, Any]:
        profile = await self._find_own(user_id)
        profile[field] = profile_model.prepend(
            profile.get(field), profile_model.new_history_entry(entry_fields)
        )
        await self.profiles.update_one({"_id": profile["_id"]}, {"$set": {field: profile[field]}})
        return await self._join_user(profile)

    async def _remove_entry(self, user_id: ObjectId, field: str, entry_id: Optional[str]) -> Dict[str, Any]:
        profile = await self._find_own(user_id)
        remaining = profile_model.remove_by_id(profile.get(field), parse_object_id(entry_id))
        if len(remaining) != len(profile.get(field) or []):
            profile[field] = remaining
            await self.profiles.update_one({"_id": profile["_id"]}, {"$set": {field: remaining}})
        else:
            logger.info(f"No {field} entry {entry_id} on profile of user {user_id}")
        return await self._join_user(profile)

    async def add_experience(self, user_id: ObjectId, request: ExperienceRequest) -> Dict[str, Any]:
        return await self._add_entry(user_id, "experience", request.model_dump(by_alias=True))

    async def remove_experience(self, user_id: ObjectId, exp_id: str) -> Dict[str, Any]:
        return await self._remove_entry(user_id, "experience", exp_id)

    async def add_education(self, user_id: ObjectId, request: EducationRequest) -> Dict[str, Any]:
        return await self._add_entry(user_id, "education", request.model_dump(by_alias=True))

    async def remove_education(self, user_id: ObjectId, edu_id: str) -> Dict[str, Any]:
        return await self._remove_entry(user_id, "education", edu_id)
