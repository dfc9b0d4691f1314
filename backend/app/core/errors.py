"""
Error types raised by the service layer.

Each error exposes an ``extensions`` dict; graphql-core copies it from the
original exception onto the GraphQL error it reports to the caller.
"""
from typing import Any


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class ValidationError(ServiceError):
    """Missing or malformed input."""

    code = "BAD_USER_INPUT"


class NotFoundError(ServiceError):
    """No matching record."""

    code = "NOT_FOUND"


class ConflictError(ServiceError):
    """Uniqueness violation on a stored field."""

    code = "CONFLICT"

    def __init__(self, field: str):
        super().__init__(f"{field} already exists")
        self.field = field

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "field": self.field}


class AuthenticationError(ServiceError):
    """Missing, invalid or mismatched caller credentials."""

    code = "UNAUTHENTICATED"


class DependencyError(ServiceError):
    """Failure of the database, the hasher or the mail transport."""

    code = "INTERNAL_SERVER_ERROR"
