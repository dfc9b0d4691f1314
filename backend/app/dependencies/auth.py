"""
Authentication dependencies resolving the caller's identity.
"""
import logging
from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, Header, Query
from jose import JWTError
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.core.security import decode_token
from app.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Caller identity carried by a verified bearer token."""
    user_id: str
    email: str
    role: str


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credentials:
        return None
    return credentials.strip()


async def get_identity(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[Optional[str], Header()] = None,
    token: Annotated[Optional[str], Query(description="JWT access token")] = None,
) -> Optional[Identity]:
    """
    Dependency returning the identity behind the request's token.

    The token is read from ``Authorization: Bearer <token>`` or, failing
    that, from the ``?token=`` query parameter. A missing, malformed or
    expired token yields None rather than an error; operations that need
    an identity reject the request themselves.
    """
    raw = _bearer_token(authorization) or token
    if not raw:
        return None

    try:
        claims = TokenPayload(**decode_token(settings, raw))
    except (JWTError, ValidationError) as e:
        logger.info(f"Rejected bearer token: {e}")
        return None

    return Identity(user_id=claims.sub, email=claims.email, role=claims.role)


# Type alias for cleaner signatures
CurrentIdentity = Annotated[Optional[Identity], Depends(get_identity)]
