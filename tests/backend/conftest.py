"""
Backend-specific test fixtures.

These fixtures extend the global fixtures with DAO helpers, both over the
in-memory database and over fully mocked collections.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio


def make_mock_collection() -> MagicMock:
    """
    Create a fully mocked motor collection.
    
    All methods are AsyncMock, allowing you to configure return values:
    
        collection.delete_many.return_value = MagicMock(acknowledged=False)
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.update_one = AsyncMock(return_value=MagicMock(acknowledged=True))
    collection.delete_one = AsyncMock(return_value=MagicMock(acknowledged=True))
    collection.delete_many = AsyncMock(return_value=MagicMock(acknowledged=True))
    return collection


# =============================================================================
# DAO Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def user_dao(mock_mflix_db):
    """UserDao over the in-memory mflix database."""
    from mflix.daos.user_dao import UserDao
    return UserDao(mock_mflix_db)


@pytest.fixture
def mocked_user_dao():
    """
    UserDao whose users and sessions collections are separate mocks.
    
    Configure them through dao.users_collection / dao.sessions_collection.
    """
    from mflix.daos.user_dao import UserDao
    
    dao = UserDao(MagicMock())
    dao.users_collection = make_mock_collection()
    dao.sessions_collection = make_mock_collection()
    return dao
