"""
MongoDB connection for the mflix data-access layer.

A single motor client is created lazily and shared by every UserDao;
pooling and timeouts are left to the driver and the connection URI.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import Optional

from mflix.config import get_settings

# Shared client, created on first use
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create the shared client from settings.mongo_uri."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    return _mongo_client


async def close_connections():
    """Close the shared client; the next get_mongo_client reconnects."""
    global _mongo_client
    
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def get_database(db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """Get the database holding users and sessions (settings.mflix_db_name by default)."""
    if db_name is None:
        db_name = get_settings().mflix_db_name
    client = await get_mongo_client()
    return client[db_name]
