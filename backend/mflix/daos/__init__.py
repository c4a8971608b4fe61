"""
Data access objects over the mflix collections.
"""
from mflix.daos.user_dao import UserDao

__all__ = ["UserDao"]
