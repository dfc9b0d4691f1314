"""
Per-request GraphQL context.
"""
from typing import Annotated, Optional

from fastapi import Depends
from strawberry.fastapi import BaseContext

from app.core.errors import AuthenticationError
from app.dependencies.auth import CurrentIdentity, Identity
from app.dependencies.services import get_auth_service, get_otp_service, get_user_service
from app.services.auth_service import AuthService
from app.services.otp_service import OtpService
from app.services.user_service import UserService


class GraphQLContext(BaseContext):
    """Services and caller identity available to every resolver."""

    def __init__(
        self,
        identity: Optional[Identity],
        auth_service: AuthService,
        user_service: UserService,
        otp_service: OtpService,
    ):
        super().__init__()
        self.identity = identity
        self.auth_service = auth_service
        self.user_service = user_service
        self.otp_service = otp_service

    @property
    def is_auth(self) -> bool:
        return self.identity is not None

    def require_auth(self) -> Identity:
        """Return the caller identity or fail the operation."""
        if self.identity is None:
            raise AuthenticationError("Unauthenticated")
        return self.identity


async def get_context(
    identity: CurrentIdentity,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    otp_service: Annotated[OtpService, Depends(get_otp_service)],
) -> GraphQLContext:
    """FastAPI dependency building the GraphQL context."""
    return GraphQLContext(
        identity=identity,
        auth_service=auth_service,
        user_service=user_service,
        otp_service=otp_service,
    )
