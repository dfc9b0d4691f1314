"""
Request and response schemas for the service layer.
"""
from app.schemas.auth import LoginResponse, TokenPayload
from app.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UpdateUserRoleRequest,
)

__all__ = [
    # Auth
    "LoginResponse",
    "TokenPayload",
    # User
    "CreateUserRequest",
    "UpdateUserRequest",
    "UpdateUserRoleRequest",
]
