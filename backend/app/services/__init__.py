"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.email_service import EmailDispatcher
from app.services.otp_service import OtpService
from app.services.user_service import UserService

__all__ = [
    "AuthService",
    "EmailDispatcher",
    "OtpService",
    "UserService",
]
