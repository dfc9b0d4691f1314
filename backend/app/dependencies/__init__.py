"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import CurrentIdentity, Identity, get_identity
from app.dependencies.services import (
    get_accounts_db,
    get_auth_service,
    get_email_dispatcher,
    get_otp_service,
    get_user_service,
)

__all__ = [
    "CurrentIdentity",
    "Identity",
    "get_identity",
    "get_accounts_db",
    "get_auth_service",
    "get_email_dispatcher",
    "get_otp_service",
    "get_user_service",
]
