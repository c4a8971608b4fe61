"""
Database module - MongoDB connection and database definitions.
"""
from mflix.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from mflix.database.databases import mflix_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "mflix_db",
]
