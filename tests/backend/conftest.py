"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with service instances bound
to the mock database.
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(mock_accounts_db, test_settings):
    """AuthService bound to the mock accounts database."""
    from app.services.auth_service import AuthService
    return AuthService(mock_accounts_db, test_settings)


@pytest.fixture
def user_service(mock_accounts_db, test_settings):
    """UserService bound to the mock accounts database."""
    from app.services.user_service import UserService
    return UserService(mock_accounts_db, test_settings)


@pytest.fixture
def otp_service(mock_accounts_db, test_settings, mock_email_dispatcher):
    """OtpService with the mocked email dispatcher."""
    from app.services.otp_service import OtpService
    return OtpService(mock_accounts_db, test_settings, mock_email_dispatcher)


@pytest.fixture
def stored_user(mock_accounts_db, mock_user):
    """Insert mock_user into the users collection; returns an awaitable."""
    async def _insert() -> dict:
        await mock_accounts_db.users.insert_one(dict(mock_user))
        return mock_user
    return _insert


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_graphql_error():
    """Helper to assert a GraphQL error with the given extensions code."""
    def _assert(body: dict, code: str, message_contains: str = None):
        assert "errors" in body, body
        error = body["errors"][0]
        assert error["extensions"]["code"] == code
        if message_contains:
            assert message_contains.lower() in error["message"].lower()
        return error
    return _assert
