"""
Pydantic models for database documents and data structures.
"""
from app.models.user import MASKED_PASSWORD, User, UserRole
from app.models.otp import OtpMedium, OtpRecord

__all__ = [
    "MASKED_PASSWORD",
    "User",
    "UserRole",
    "OtpMedium",
    "OtpRecord",
]
