"""
Global test fixtures for the User Service.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) with the production unique indexes
- Registration payload factories
- Stored account documents
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes, including unique index enforcement.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_users_collection(mock_async_mongo_client):
    """Provide userdb.users with the same unique indexes as production."""
    collection = mock_async_mongo_client["userdb"]["users"]
    for field in ("email", "user_name", "phone"):
        await collection.create_index(field, unique=True)
    yield collection


@pytest_asyncio.fixture
async def account_store(mock_users_collection):
    """AccountStore backed by the mock users collection."""
    from user_service.services.account_store import AccountStore

    return AccountStore(mock_users_collection)


# =============================================================================
# Registration Fixtures
# =============================================================================

@pytest.fixture
def registration_data() -> dict:
    """Raw RegisterUser payload, before normalization."""
    return {
        "full_name": "Jane Doe",
        "user_name": "JaneD1",
        "email_address": "Jane@Example.com",
        "phone_number": "0712345678",
        "password": "x",
    }


@pytest.fixture
def make_registration(registration_data):
    """
    Factory for RegisterUser payloads with overrides.

    Usage:
        payload = make_registration(user_name="other1")
    """
    def _make(**overrides) -> dict:
        return {**registration_data, **overrides}
    return _make


@pytest.fixture
def stored_account_doc() -> dict:
    """A complete account document as stored in MongoDB."""
    now = datetime.now(timezone.utc)
    return {
        "full_name": "John Smith",
        "user_name": "johnsmith",
        "email": "john@example.com",
        "phone": "254700000001",
        "password_hash": "s3cret-material",
        "created_at": now,
        "updated_at": now,
    }
