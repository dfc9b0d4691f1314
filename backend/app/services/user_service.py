"""
User service for listing, retrieving, updating and deleting accounts.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.config import Settings
from app.core.errors import DependencyError
from app.core.security import hash_password
from app.database.databases.accounts_db import Collections
from app.models.user import User
from app.schemas.user import UpdateUserRequest, UpdateUserRoleRequest

logger = logging.getLogger(__name__)


def _object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class UserService:
    """Service for user collection operations."""

    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings):
        self.db = db
        self.users_collection = db[Collections.USERS]
        self.settings = settings

    async def list_users(self) -> list[User]:
        """Return every user record."""
        cursor = self.users_collection.find({})
        docs = await cursor.to_list(length=None)
        return [User.from_document(doc) for doc in docs]

    async def get_user(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User model or None if not found or the ID is malformed
        """
        oid = _object_id(user_id)
        if oid is None:
            return None

        user_doc = await self.users_collection.find_one({"_id": oid})
        if not user_doc:
            return None
        return User.from_document(user_doc)

    async def update_user(
        self,
        user_id: str,
        request: UpdateUserRequest,
    ) -> Optional[User]:
        """
        Update profile fields of a user.

        Only supplied fields are written; a new password is hashed first.

        Returns:
            The updated user, or None if no user has this ID

        Raises:
            DependencyError: If hashing or persistence fails
        """
        changes = request.changes()
        if "password" in changes:
            try:
                changes["password"] = hash_password(
                    changes["password"], self.settings.bcrypt_rounds
                )
            except (ValueError, TypeError) as e:
                logger.error(f"Password hashing failed for user {user_id}: {e}")
                raise DependencyError("Failed to hash password") from e
        return await self._apply(user_id, changes)

    async def update_user_role(
        self,
        user_id: str,
        request: UpdateUserRoleRequest,
    ) -> Optional[User]:
        """Assign a new role to a user."""
        return await self._apply(user_id, {"role": request.role.value})

    async def delete_user(self, user_id: str) -> Optional[User]:
        """
        Delete a user by ID.

        Returns:
            The removed user, or None if nothing was deleted
        """
        oid = _object_id(user_id)
        if oid is None:
            return None

        try:
            user_doc = await self.users_collection.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Failed to delete user {user_id}: {e}")
            raise DependencyError(f"Failed to delete user: {e}") from e

        if not user_doc:
            return None
        logger.info(f"Deleted user {user_id}")
        return User.from_document(user_doc)

    async def _apply(self, user_id: str, changes: dict) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None

        changes["updated_at"] = datetime.now(timezone.utc)
        try:
            user_doc = await self.users_collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Failed to update user {user_id}: {e}")
            raise DependencyError(f"Failed to update user: {e}") from e

        if not user_doc:
            return None
        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return User.from_document(user_doc)
