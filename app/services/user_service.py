"""User accounts: registration, credential checks and lookups."""

import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import NotFoundError, ValidationError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.session import USERS
from app.models.user import PUBLIC_PROJECTION, new_user
from app.utils.helpers import parse_object_id

logger = logging.getLogger(__name__)

USER_EXISTS = "User already exists"
INVALID_CREDENTIALS = "Invalid credentials"


class UserService:
    """Operations on the ``users`` collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[USERS]

    async def register(self, name: str, email: str, password: str) -> str:
        """Create the account and return a token for it."""
        if await self.collection.find_one({"email": email}, {"_id": 1}):
            raise ValidationError.single(USER_EXISTS)

        user = new_user(name, email, get_password_hash(password))
        try:
            result = await self.collection.insert_one(user)
        except DuplicateKeyError:
            # Lost a race with a concurrent registration for the same email
            raise ValidationError.single(USER_EXISTS)

        logger.info(f"Registered user {result.inserted_id}")
        return create_access_token(str(result.inserted_id))

    async def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return a fresh token."""
        user = await self.collection.find_one({"email": email})
        if not user or not verify_password(password, user.get("password")):
            raise ValidationError.single(INVALID_CREDENTIALS)
        return create_access_token(str(user["_id"]))

    async def get_public(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """Load a user without private fields; None for unknown or malformed ids."""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await self.collection.find_one({"_id": oid}, PUBLIC_PROJECTION)

    async def get_public_or_404(self, user_id: Any) -> Dict[str, Any]:
        user = await self.get_public(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
