"""MongoDB client lifecycle and the database dependency."""

import logging
from typing import AsyncGenerator, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from app.config import settings

logger = logging.getLogger(__name__)

USERS = "users"
PROFILES = "profiles"
POSTS = "posts"


class MongoDB:
    """Holds the process-wide motor client."""

    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None


mongodb = MongoDB()


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes the collections rely on."""
    await db[USERS].create_index([("email", ASCENDING)], unique=True)
    await db[PROFILES].create_index([("user", ASCENDING)], unique=True)
    await db[POSTS].create_index([("date", DESCENDING)])
    logger.info("MongoDB indexes ensured")


async def init_db() -> None:
    """Connect to MongoDB and make sure indexes exist."""
    if mongodb.client is not None:
        return

    try:
        mongodb.client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            maxPoolSize=settings.MONGODB_MAX_POOL_SIZE,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )
        mongodb.db = mongodb.client[settings.MONGODB_DATABASE]
        await create_indexes(mongodb.db)
        logger.info(f"Connected to MongoDB: {settings.MONGODB_DATABASE}")
    except Exception as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        raise


async def close_db() -> None:
    """Close the client on shutdown."""
    if mongodb.client is not None:
        mongodb.client.close()
        mongodb.client = None
        mongodb.db = None
        logger.info("MongoDB connection closed")


async def get_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """Dependency to get the database handle."""
    if mongodb.db is None:
        await init_db()
    yield mongodb.db
