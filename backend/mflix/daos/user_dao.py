"""
Data access for user accounts and their authentication sessions.
"""
import logging
from typing import Any, Mapping, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import WriteError

from mflix.config import get_settings
from mflix.core.exceptions import DuplicateOrInvalidWrite, InvalidArgument
from mflix.models.session import Session
from mflix.models.user import User

logger = logging.getLogger(__name__)


class UserDao:
    """
    Repository over the users and sessions collections.
    
    Lookups return None when nothing matches. add_user raises on a rejected
    insert; the other writes log the failure and return False.
    """
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the mflix database."""
        self.db = db
        settings = get_settings()
        self.users_collection = db[settings.users_collection]
        self.sessions_collection = db[settings.sessions_collection]
    
    async def add_user(self, user: User) -> bool:
        """
        Insert a new user.
        
        Args:
            user: Fully populated user record
            
        Returns:
            True once the insert is accepted
            
        Raises:
            DuplicateOrInvalidWrite: If the email is already registered or
                the store refuses the document
        """
        try:
            await self.users_collection.insert_one(user.to_document())
        except WriteError as e:
            raise DuplicateOrInvalidWrite(str(e)) from e
        return True
    
    async def create_user_session(self, user_id: str, jwt: str) -> bool:
        """
        Replace any existing session of a user with a new one.
        
        Existing sessions are deleted first, then the new one is inserted.
        The two steps are not atomic: concurrent calls for the same user
        can leave zero or two sessions behind.
        
        Args:
            user_id: User identifier
            jwt: Token to store
            
        Returns:
            True if a session for the user exists afterwards
        """
        try:
            if not await self.delete_user_sessions(user_id):
                return False
            session = Session(user_id=user_id, jwt=jwt)
            await self.sessions_collection.insert_one(session.to_document())
        except WriteError as e:
            logger.warning(f"Failed to create session for {user_id}: {e}")
            return False
        
        return await self.get_user_session(user_id) is not None
    
    async def get_user(self, email: str) -> Optional[User]:
        """
        Get user by email.
        
        Args:
            email: User email address
            
        Returns:
            User model or None if not found
        """
        user_doc = await self.users_collection.find_one({"email": email})
        
        if not user_doc:
            return None
        
        return User.from_document(user_doc)
    
    async def get_user_session(self, user_id: str) -> Optional[Session]:
        """Get the session of a user, or None."""
        session_doc = await self.sessions_collection.find_one({"user_id": user_id})
        
        if not session_doc:
            return None
        
        return Session.from_document(session_doc)
    
    async def delete_user_sessions(self, user_id: str) -> bool:
        """
        Delete every session of a user.
        
        Returns whether the store acknowledged the delete, even when no
        session matched.
        """
        result = await self.sessions_collection.delete_many({"user_id": user_id})
        return result.acknowledged
    
    async def delete_user(self, email: str) -> bool:
        """
        Delete a user and its sessions.
        
        Sessions are keyed by the user's email, or by its _id when the
        caller uses that as user_id; both are purged. The session and user
        deletes are separate writes.
        
        Args:
            email: Email of the user to delete
            
        Returns:
            Acknowledgement of the user delete, False on a write failure
        """
        try:
            await self._delete_identity_sessions(email)
            result = await self.users_collection.delete_one({"email": email})
            return result.acknowledged
        except WriteError as e:
            logger.warning(f"Failed to delete user {email}: {e}")
        
        return False
    
    async def update_user_preferences(
        self,
        email: str,
        preferences: Optional[Mapping[str, Any]],
    ) -> bool:
        """
        Replace the preferences of a user.
        
        The stored mapping is overwritten, not merged. An empty mapping
        clears it.
        
        Args:
            email: Email of the user to update
            preferences: New preferences
            
        Returns:
            Acknowledgement of the update (True even if no user matched),
            False on a write failure
            
        Raises:
            InvalidArgument: If preferences is None
        """
        if preferences is None:
            raise InvalidArgument("User preferences cannot be null")
        
        try:
            result = await self.users_collection.update_one(
                {"email": email},
                {"$set": {"preferences": dict(preferences)}},
            )
            return result.acknowledged
        except WriteError as e:
            logger.warning(f"Failed to update preferences of {email}: {e}")
        
        return False
    
    async def _delete_identity_sessions(self, email: str) -> None:
        """Delete sessions keyed by the user's email or by its stored _id."""
        user_ids = [email]
        user_doc = await self.users_collection.find_one({"email": email}, {"_id": 1})
        if user_doc is not None and str(user_doc["_id"]) != email:
            user_ids.append(str(user_doc["_id"]))
        
        await self.sessions_collection.delete_many({"user_id": {"$in": user_ids}})
