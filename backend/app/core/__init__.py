"""
Core module - Security, validation and error types.
"""
from app.core.errors import (
    AuthenticationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from app.core.validators import is_valid_email, normalize_email

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DependencyError",
    "NotFoundError",
    "ServiceError",
    "ValidationError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "is_valid_email",
    "normalize_email",
]
