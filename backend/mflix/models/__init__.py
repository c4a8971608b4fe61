"""
Pydantic models for database documents.
"""
from mflix.models.user import User
from mflix.models.session import Session

__all__ = [
    "User",
    "Session",
]
