"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing the
FastAPI app, the UserService handlers and the account store.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings that never touch the environment or a real server."""
    from user_service.config import Settings

    return Settings(
        _env_file=None,
        mongodb_uri="mongodb://test:27017",
        startup_timeout_seconds=0.5,
        log_level="DEBUG",
    )


# =============================================================================
# Store / Service Fixtures
# =============================================================================

@pytest.fixture
def mock_store():
    """
    Create a fully mocked AccountStore.

    All methods are AsyncMock, allowing you to configure outcomes:

        mock_store.find_by_identity.side_effect = AccountNotFoundError()
    """
    store = MagicMock()
    store.find_by_identity = AsyncMock()
    store.find_by_email = AsyncMock()
    store.insert = AsyncMock()
    store.ensure_indexes = AsyncMock()
    store.ping = AsyncMock()
    return store


@pytest.fixture
def user_service(account_store):
    """UserService over the in-memory store."""
    from user_service.services.user_service import UserService

    return UserService(account_store)


# =============================================================================
# FastAPI App Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, account_store):
    """App wired to the in-memory store; startup does not connect."""
    from user_service.main import create_app

    return create_app(test_settings, store=account_store)


@pytest_asyncio.fixture
async def async_client(app):
    """
    Async test client with the app lifespan running.

    httpx's ASGITransport does not send lifespan events, so the lifespan
    context is entered explicitly.
    """
    from httpx import ASGITransport, AsyncClient

    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the RPC error body."""
    def _assert(response, status_code: int, code: str, message: str | None = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["code"] == code
        if message is not None:
            assert data["message"] == message
    return _assert
