"""
Security utilities for password hashing and JWT token management.
"""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

from jose import jwt
from passlib.context import CryptContext

from app.config import Settings


# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@lru_cache
def get_password_context(rounds: int) -> CryptContext:
    """Hashing context pinned to the given bcrypt cost factor."""
    return pwd_context.copy(bcrypt__rounds=rounds)


def hash_password(plain_password: str, rounds: int) -> str:
    """
    Hash a plain password using bcrypt.

    A fresh random salt is generated for every call.

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor

    Returns:
        Hashed password string
    """
    return get_password_context(rounds).hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    The cost factor is read from the hash itself.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    settings: Settings,
    user_id: str,
    email: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        settings: Application settings holding the signing secret
        user_id: Unique user identifier
        email: User email address
        role: User role (e.g. "User", "Admin")
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.jwt_access_token_expire_hours)

    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }

    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(settings: Settings, token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload dictionary with keys: sub, email, role, exp, iat

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
    )

