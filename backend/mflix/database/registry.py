"""
Index management.
Ensures the users and sessions collections are indexed on startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import OperationFailure

from mflix.config import get_settings
from mflix.database.databases import mflix_db

logger = logging.getLogger(__name__)


def _collection_names() -> dict[str, str]:
    """Map index definition keys to the configured collection names."""
    settings = get_settings()
    return {
        mflix_db.Collections.USERS: settings.users_collection,
        mflix_db.Collections.SESSIONS: settings.sessions_collection,
    }


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the users and sessions collections."""
    names = _collection_names()
    for collection_key, indexes in mflix_db.Collections.INDEXES.items():
        collection = db[names[collection_key]]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except OperationFailure as e:
                # Index might already exist with different options
                logger.warning(
                    f"Could not create index {keys} on {collection.name}: {e}"
                )
