"""
User model for the mflix users collection.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User document model for MongoDB mflix.users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB _id as string")
    email: str = Field(..., description="Unique email address, validated by the caller")
    name: str = Field(..., description="Display name")
    password: str = Field(..., description="Password, hashed by the caller")
    preferences: Optional[dict[str, Any]] = Field(
        None,
        description="Free-form preference name to value mapping"
    )

    class Config:
        populate_by_name = True

    def to_document(self) -> dict[str, Any]:
        """Serialize to a MongoDB document, leaving unset fields out."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "User":
        """Build a User from a raw MongoDB document."""
        doc = dict(doc)
        if "_id" in doc:
            doc["_id"] = str(doc["_id"])
        return cls(**doc)
