"""
Session model for the mflix sessions collection.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field


class Session(BaseModel):
    """
    Session document model for MongoDB mflix.sessions collection.
    
    One session per user is kept by UserDao.create_user_session; the
    collection itself does not enforce it.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB _id as string")
    user_id: str = Field(..., description="Owning user identifier")
    jwt: str = Field(..., description="Opaque authentication token")

    class Config:
        populate_by_name = True

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Session":
        doc = dict(doc)
        if "_id" in doc:
            doc["_id"] = str(doc["_id"])
        return cls(**doc)
