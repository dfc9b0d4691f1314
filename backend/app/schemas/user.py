"""
User request schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from app.models.user import UserRole


class CreateUserRequest(BaseModel):
    """Registration input. Email format is checked by the service."""
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="Plain text password")
    avatar: Optional[str] = Field(None, description="Avatar URI")
    role: UserRole = Field(default=UserRole.User, description="Initial role")
    dial_code: Optional[str] = Field(None, description="Phone dial code")
    phone: Optional[str] = Field(None, description="Phone number")


class UpdateUserRequest(BaseModel):
    """Profile update; fields left as None are not touched."""
    name: Optional[str] = None
    password: Optional[str] = None
    avatar: Optional[str] = None
    dial_code: Optional[str] = None
    phone: Optional[str] = None

    def changes(self) -> dict:
        """Supplied fields keyed by their stored names."""
        fields = self.model_dump(exclude_none=True)
        if "dial_code" in fields:
            fields["dialCode"] = fields.pop("dial_code")
        return fields


class UpdateUserRoleRequest(BaseModel):
    """Role assignment."""
    role: UserRole
