"""
Startup and shutdown of the data-access layer.

Startup:
- Configure logging
- Initialize the MongoDB connection
- Create indexes

Shutdown:
- Close the database connection
"""
import logging

from mflix.core.logging import configure_logging
from mflix.daos.user_dao import UserDao
from mflix.database.connections import close_connections, get_database
from mflix.database.registry import create_indexes

logger = logging.getLogger(__name__)


async def startup() -> UserDao:
    """Connect, ensure indexes, and return a ready UserDao."""
    configure_logging()
    logger.info("Starting mflix data-access layer...")
    
    db = await get_database()
    await create_indexes(db)
    logger.info(f"Indexes ensured on database {db.name}")
    
    return UserDao(db)


async def shutdown() -> None:
    """Close the database connection."""
    logger.info("Shutting down mflix data-access layer...")
    await close_connections()


async def get_user_dao() -> UserDao:
    """Dependency provider returning a UserDao on the shared connection."""
    db = await get_database()
    return UserDao(db)
