"""
Database definitions and collection constants.
"""
from mflix.database.databases import mflix_db

__all__ = ["mflix_db"]
