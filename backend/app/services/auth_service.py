"""
Authentication service for registration and login.
"""
import logging
import re
from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.config import Settings
from app.core.errors import (
    AuthenticationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)
from app.core.security import create_access_token, hash_password, verify_password
from app.core.validators import normalize_email
from app.database.databases.accounts_db import Collections
from app.models.user import User
from app.schemas.auth import LoginResponse
from app.schemas.user import CreateUserRequest

logger = logging.getLogger(__name__)

_DUP_INDEX_RE = re.compile(r"index: (\w+?)_-?\d+")


def duplicate_key_field(error: DuplicateKeyError) -> str:
    """Name of the field whose unique index rejected a write."""
    details = error.details or {}
    key_value = details.get("keyValue")
    if key_value:
        return next(iter(key_value))
    match = _DUP_INDEX_RE.search(str(error))
    if match:
        return match.group(1)
    # email carries the only unique index on users
    return "email"


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings):
        """Initialize with accounts database and settings."""
        self.db = db
        self.users_collection = db[Collections.USERS]
        self.settings = settings

    async def register_user(self, request: CreateUserRequest) -> User:
        """
        Register a new user.

        Args:
            request: Registration input

        Returns:
            The created user (stored hash in ``password``)

        Raises:
            ValidationError: If the email is malformed
            ConflictError: If a unique field is already taken
            DependencyError: If hashing or persistence fails
        """
        email = normalize_email(request.email)
        if email is None:
            raise ValidationError("Invalid email")

        try:
            hashed = hash_password(request.password, self.settings.bcrypt_rounds)
        except (ValueError, TypeError) as e:
            logger.error(f"Password hashing failed for {email}: {e}")
            raise DependencyError("Failed to hash password") from e

        now = datetime.now(timezone.utc)
        user_doc = {
            "name": request.name,
            "email": email,
            "password": hashed,
            "avatar": request.avatar or "",
            "role": request.role.value,
            "dialCode": request.dial_code or "",
            "phone": request.phone or None,
            "created_at": now,
            "updated_at": now,
        }

        try:
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            field = duplicate_key_field(e)
            logger.warning(
                f"Registration rejected, duplicate {field}: "
                f"{(e.details or {}).get('keyValue')}"
            )
            raise ConflictError(field) from e
        except PyMongoError as e:
            logger.error(f"Failed to register user {email}: {e}")
            raise DependencyError(f"Failed to register user: {e}") from e

        user_doc["_id"] = result.inserted_id
        logger.info(f"Registered user {result.inserted_id}")
        return User.from_document(user_doc)

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Raises:
            ValidationError: If email or password is missing
            NotFoundError: If no user has this email
            AuthenticationError: If the password does not match
        """
        if not email or not password:
            raise ValidationError("Email or password is missing")

        # stored addresses are normalized; anything that is not one matches nobody
        user_doc = await self.users_collection.find_one(
            {"email": normalize_email(email) or email}
        )
        if not user_doc:
            raise NotFoundError("User not found")

        if not verify_password(password, user_doc["password"]):
            logger.info(f"Failed login for user {user_doc['_id']}")
            raise AuthenticationError("Password is incorrect")

        user = User.from_document(user_doc)
        token = create_access_token(
            self.settings,
            user_id=user.id,
            email=user.email,
            role=user.role.value,
        )

        return LoginResponse(
            user_id=user.id,
            user_role=user.role.value,
            token=token,
            token_expiration_hours=self.settings.jwt_access_token_expire_hours,
        )
