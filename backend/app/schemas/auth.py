"""
Authentication response schemas.
"""
from datetime import datetime

from pydantic import BaseModel, Field


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    user_id: str = Field(..., description="Authenticated user ID")
    user_role: str = Field(..., description="User role")
    token: str = Field(..., description="JWT access token")
    token_expiration_hours: int = Field(..., description="Token validity in hours")


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""
    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User email")
    role: str = Field(..., description="User role")
    exp: datetime = Field(..., description="Expiration time")
    iat: datetime = Field(..., description="Issued at time")
