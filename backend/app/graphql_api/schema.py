"""
GraphQL schema: user queries and mutations.

``updateUser``, ``updateUserRole`` and ``deleteUser`` require an
authenticated caller. Reads, registration, login and OTP requests are open.
"""
from typing import Optional

import strawberry
from graphql.validation import NoSchemaIntrospectionCustomRule
from strawberry.extensions import AddValidationRules
from strawberry.types import Info

from app.config import Settings
from app.graphql_api.context import GraphQLContext
from app.graphql_api.types import (
    AuthPayload,
    CreateUserInput,
    UpdateUserInput,
    UpdateUserRoleInput,
    UserType,
)
from app.models.user import UserRole
from app.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UpdateUserRoleRequest,
)

ContextInfo = Info[GraphQLContext, None]


def _to_type(user) -> Optional[UserType]:
    return UserType.from_model(user) if user is not None else None


@strawberry.type
class Query:
    @strawberry.field
    async def list_user(self, info: ContextInfo) -> list[UserType]:
        users = await info.context.user_service.list_users()
        return [UserType.from_model(user) for user in users]

    @strawberry.field
    async def get_user(self, info: ContextInfo, id: strawberry.ID) -> Optional[UserType]:
        return _to_type(await info.context.user_service.get_user(id))

    @strawberry.field
    async def login_user(self, info: ContextInfo, email: str, password: str) -> AuthPayload:
        response = await info.context.auth_service.login(email, password)
        return AuthPayload.from_response(response)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def get_otp(self, info: ContextInfo, email: str) -> str:
        return await info.context.otp_service.request_otp(email)

    @strawberry.mutation
    async def create_user(self, info: ContextInfo, input: CreateUserInput) -> UserType:
        request = CreateUserRequest(
            name=input.name,
            email=input.email,
            password=input.password,
            avatar=input.avatar,
            role=input.role or UserRole.User,
            dial_code=input.dial_code,
            phone=input.phone,
        )
        user = await info.context.auth_service.register_user(request)
        return UserType.from_model(user)

    @strawberry.mutation
    async def update_user(
        self, info: ContextInfo, id: strawberry.ID, input: UpdateUserInput
    ) -> Optional[UserType]:
        info.context.require_auth()
        request = UpdateUserRequest(
            name=input.name,
            password=input.password,
            avatar=input.avatar,
            dial_code=input.dial_code,
            phone=input.phone,
        )
        return _to_type(await info.context.user_service.update_user(id, request))

    @strawberry.mutation
    async def update_user_role(
        self, info: ContextInfo, id: strawberry.ID, input: UpdateUserRoleInput
    ) -> Optional[UserType]:
        info.context.require_auth()
        request = UpdateUserRoleRequest(role=input.role)
        return _to_type(await info.context.user_service.update_user_role(id, request))

    @strawberry.mutation
    async def delete_user(self, info: ContextInfo, id: strawberry.ID) -> Optional[UserType]:
        info.context.require_auth()
        return _to_type(await info.context.user_service.delete_user(id))


def build_schema(settings: Settings) -> strawberry.Schema:
    """Create the executable schema."""
    extensions = []
    if not settings.graphql_introspection:
        extensions.append(AddValidationRules([NoSchemaIntrospectionCustomRule]))
    return strawberry.Schema(query=Query, mutation=Mutation, extensions=extensions)
