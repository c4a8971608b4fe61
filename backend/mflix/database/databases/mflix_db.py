"""
mflix database configuration.
Stores user accounts and their authentication sessions.

Structure:
- users: One document per account, keyed by unique email
- sessions: Active session per user (user_id -> jwt)
"""


class Collections:
    """Collection names in the mflix database."""
    USERS = "users"
    SESSIONS = "sessions"
    
    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
        ],
        "sessions": [
            {"keys": [("user_id", 1)]},  # Non-unique, one session is kept by the DAO
        ],
    }
