# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


async def ensure_user_indexes(user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
    """
    Create the unique indexes that make the users collection the authoritative
    guard against duplicate registrations.
    """
    collection = user_collection if user_collection is not None else get_user_collection()
    for field in (UserFields.EMAIL, UserFields.USERNAME, UserFields.PHONE):
        await collection.create_index(field, unique=True, name=f"{field}_unique")
    logger.info("User collection indexes ensured")


async def ping_database() -> bool:
    """Check database connectivity for the /health endpoint"""
    try:
        await get_database().command("ping")
        return True
    except Exception as e:
        logger.warning("Database ping failed: %s", str(e)[:100])
        return False


def close_database() -> None:
    """Close the client on shutdown and drop the cached handles"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
