"""
GraphQL object and input types.
"""
from typing import Optional

import strawberry

from app.models.user import MASKED_PASSWORD, User, UserRole
from app.schemas.auth import LoginResponse

# Expose the stored role values (Admin, User, ...) as the GraphQL enum
strawberry.enum(UserRole)


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: str
    email: str
    password: str
    avatar: Optional[str]
    role: Optional[UserRole]
    dial_code: Optional[str]
    phone: Optional[str]

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        """Expose a stored user; the password hash never leaves the service."""
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            password=MASKED_PASSWORD,
            avatar=user.avatar,
            role=user.role,
            dial_code=user.dial_code,
            phone=user.phone,
        )


@strawberry.type
class AuthPayload:
    user_id: strawberry.ID
    user_role: str
    token: str
    token_expiration_hours: int

    @classmethod
    def from_response(cls, response: LoginResponse) -> "AuthPayload":
        return cls(
            user_id=strawberry.ID(response.user_id),
            user_role=response.user_role,
            token=response.token,
            token_expiration_hours=response.token_expiration_hours,
        )


@strawberry.input
class CreateUserInput:
    name: str
    email: str
    password: str
    avatar: Optional[str] = None
    role: Optional[UserRole] = UserRole.User
    dial_code: Optional[str] = None
    phone: Optional[str] = None


@strawberry.input
class UpdateUserInput:
    name: Optional[str] = None
    password: Optional[str] = None
    avatar: Optional[str] = None
    dial_code: Optional[str] = None
    phone: Optional[str] = None


@strawberry.input
class UpdateUserRoleInput:
    role: UserRole
