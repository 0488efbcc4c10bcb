"""
MongoDB connection helpers.

Clients are created by the app lifespan and handed to the services that
need them; nothing here is cached at module level.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from user_service.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client that gives up on server selection in time."""
    timeout_ms = int(settings.startup_timeout_seconds * 1000)
    return AsyncIOMotorClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=timeout_ms,
    )


def get_users_collection(
    client: AsyncIOMotorClient, settings: Settings
) -> AsyncIOMotorCollection:
    """Get the accounts collection configured in settings."""
    return client[settings.users_db_name][settings.users_collection]
