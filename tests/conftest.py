"""
Global test fixtures for the Accounts API.

This module provides shared fixtures for all tests including:
- Test settings (fast bcrypt, fixed JWT secret)
- Mock MongoDB (mongomock-motor)
- Mock email dispatcher
- Test user factories
- GraphQL client with dependency overrides
"""

import sys
from pathlib import Path
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings tuned for tests: cheapest bcrypt cost, fixed secret."""
    from app.config import Settings

    return Settings(
        environment="test",
        mongo_uri="mongodb://localhost:27017",
        mongo_db_name="accounts_db_test",
        jwt_secret_key="test-secret-key",
        bcrypt_rounds=4,
        otp_length=6,
        otp_expire_minutes=5,
        smtp_host="smtp.test",
        mail_from="no-reply@test.local",
    )


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_accounts_db(mock_async_mongo_client, test_settings):
    """Provide mock accounts database with the real indexes."""
    from app.database.indexes import create_indexes

    db = mock_async_mongo_client[test_settings.mongo_db_name]
    await create_indexes(db)
    yield db


# =============================================================================
# Email Fixtures
# =============================================================================

@pytest.fixture
def mock_email_dispatcher():
    """
    Create a mocked EmailDispatcher.

    ``send_otp`` is an AsyncMock; set ``side_effect`` to simulate failures.
    """
    dispatcher = MagicMock()
    dispatcher.send_otp = AsyncMock(return_value=None)
    return dispatcher


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "name": "Test User",
        "email": "testuser@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def mock_user() -> dict:
    """A complete user document as stored in MongoDB."""
    from bson import ObjectId

    return {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "name": "Stored User",
        "email": "stored@example.com",
        "password": "$2b$04$9gZ0Zl5mCkJQ0sT0kq6s3O7nQ0m0h3cQbXbFQ3cC3oQm0kQ1o0m6a",
        "avatar": "",
        "role": "User",
        "dialCode": "+1",
        "phone": "5550100",
    }


@pytest_asyncio.fixture
async def registered_user(mock_accounts_db, test_settings, test_user_data):
    """Register test_user_data through the service and return the User."""
    from app.schemas.user import CreateUserRequest
    from app.services.auth_service import AuthService

    service = AuthService(mock_accounts_db, test_settings)
    return await service.register_user(CreateUserRequest(**test_user_data))


@pytest.fixture
def make_token(test_settings):
    """Factory issuing signed tokens with the test secret."""
    from app.core.security import create_access_token

    def _make(user_id: str = "507f1f77bcf86cd799439011", role: str = "User", **kwargs) -> str:
        return create_access_token(
            test_settings,
            user_id=user_id,
            email=kwargs.pop("email", "testuser@example.com"),
            role=role,
            **kwargs,
        )

    return _make


# =============================================================================
# FastAPI / GraphQL Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app; use with the dependency overrides
    below so no real database or SMTP server is touched.
    """
    from app.main import app
    return app


@pytest_asyncio.fixture
async def async_client(app, test_settings, mock_accounts_db, mock_email_dispatcher):
    """
    Async test client with settings, database and mailer overridden.

    ASGITransport does not run the lifespan, so startup never reaches
    a real MongoDB.
    """
    from httpx import AsyncClient, ASGITransport

    from app.config import get_settings
    from app.dependencies.services import get_accounts_db, get_email_dispatcher

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_accounts_db] = lambda: mock_accounts_db
    app.dependency_overrides[get_email_dispatcher] = lambda: mock_email_dispatcher

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def graphql(async_client):
    """
    Helper posting a GraphQL operation and returning the decoded body.

    Usage:
        body = await graphql("{ listUser { id } }", token=token)
    """
    async def _execute(
        query: str,
        variables: Optional[dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> dict:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        response = await async_client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=headers,
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _execute
