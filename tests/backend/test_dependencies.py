"""
Tests for request identity resolution (app.dependencies.auth).
"""

import pytest


class TestGetIdentity:
    """Tests for get_identity."""

    @pytest.mark.asyncio
    async def test_bearer_header_yields_identity(self, test_settings, make_token):
        from app.dependencies.auth import get_identity

        token = make_token(user_id="u1", role="Admin", email="a@x.com")

        identity = await get_identity(test_settings, authorization=f"Bearer {token}")

        assert identity.user_id == "u1"
        assert identity.role == "Admin"
        assert identity.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_query_token_is_fallback(self, test_settings, make_token):
        from app.dependencies.auth import get_identity

        identity = await get_identity(test_settings, authorization=None, token=make_token())

        assert identity is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc", "Bearer garbage"])
    async def test_missing_or_bad_header_is_anonymous(self, test_settings, header):
        from app.dependencies.auth import get_identity

        assert await get_identity(test_settings, authorization=header) is None

    @pytest.mark.asyncio
    async def test_expired_token_is_anonymous(self, test_settings, make_token):
        from datetime import timedelta

        from app.dependencies.auth import get_identity

        token = make_token(expires_delta=timedelta(seconds=-5))

        assert await get_identity(test_settings, authorization=f"Bearer {token}") is None


class TestGraphQLContext:
    """Tests for GraphQLContext.require_auth."""

    def test_require_auth_without_identity_raises(self):
        from app.core.errors import AuthenticationError
        from app.graphql_api.context import GraphQLContext

        context = GraphQLContext(None, None, None, None)

        assert context.is_auth is False
        with pytest.raises(AuthenticationError):
            context.require_auth()

    def test_require_auth_returns_identity(self):
        from app.dependencies.auth import Identity
        from app.graphql_api.context import GraphQLContext

        identity = Identity(user_id="u1", email="a@x.com", role="User")
        context = GraphQLContext(identity, None, None, None)

        assert context.is_auth is True
        assert context.require_auth() is identity
