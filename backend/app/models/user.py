"""
User model for the accounts database.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

# Value returned in place of the stored hash on every outgoing user record.
MASKED_PASSWORD = "secured_password"


class UserRole(str, Enum):
    """User role levels."""
    Admin = "Admin"
    User = "User"
    Editor = "Editor"
    Moderator = "Moderator"


class User(BaseModel):
    """
    User document model for MongoDB accounts_db.users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    password: str = Field(..., description="Bcrypt hashed password")
    avatar: Optional[str] = Field("", description="Avatar URI")
    role: UserRole = Field(default=UserRole.User, description="Assigned role")
    dial_code: Optional[str] = Field("", alias="dialCode", description="Phone dial code")
    phone: Optional[str] = Field(None, description="Phone number")
    created_at: Optional[datetime] = Field(None, description="Account creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        """Build a User from a raw MongoDB document."""
        doc = dict(doc)
        doc["_id"] = str(doc["_id"])
        return cls(**doc)
