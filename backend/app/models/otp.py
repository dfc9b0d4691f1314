"""
One-time password model for the accounts database.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class OtpMedium:
    """Delivery channels for one-time passwords."""
    EMAIL = "email"


class OtpRecord(BaseModel):
    """
    OTP document model for MongoDB accounts_db.otps collection.

    Records are purged by the TTL index on ``expires_at``.
    """
    id: Optional[str] = Field(None, alias="_id")
    email: str = Field(..., description="Address the code was sent to")
    otp: str = Field(..., description="Generated code")
    medium: str = Field(default=OtpMedium.EMAIL, description="Delivery channel")
    created_at: datetime = Field(..., description="Issue time (UTC)")
    expires_at: datetime = Field(..., description="Expiry time (UTC)")

    class Config:
        populate_by_name = True

    def to_document(self) -> dict:
        return self.model_dump(exclude={"id"})
