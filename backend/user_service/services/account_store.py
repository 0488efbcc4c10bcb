"""
Account store gateway over the MongoDB users collection.

Translates driver outcomes into three store errors: not found, duplicate
key and everything else. The unique indexes created by ``ensure_indexes``
are the only real guard against two concurrent registrations of the same
identity; ``find_by_identity`` is a friendly early check and nothing more.
"""
import asyncio
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from user_service.config import Settings
from user_service.database.connections import create_mongo_client, get_users_collection
from user_service.database.databases import user_db
from user_service.models.account import Account

logger = logging.getLogger(__name__)


class AccountNotFoundError(Exception):
    """No account matched the query."""


class DuplicateAccountError(Exception):
    """A unique index rejected the write."""


class AccountStoreError(Exception):
    """Any other store or connectivity failure."""


class AccountStore:
    """Gateway for reading and creating accounts."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialize with the users collection."""
        self.collection = collection

    async def find_by_identity(self, email: str, user_name: str, phone: str) -> Account:
        """
        Find an account matching ANY of the identity fields.

        Args:
            email: Normalized email
            user_name: Normalized username
            phone: Normalized phone number

        Returns:
            The first matching account

        Raises:
            AccountNotFoundError: If no account matches
            AccountStoreError: On any driver failure
        """
        query = {
            "$or": [
                {"email": email},
                {"user_name": user_name},
                {"phone": phone},
            ]
        }
        return await self._find_one(query)

    async def find_by_email(self, email: str) -> Account:
        """Find an account by email only. Raises like ``find_by_identity``."""
        return await self._find_one({"email": email})

    async def insert(self, account: Account) -> None:
        """
        Persist a new account.

        Raises:
            DuplicateAccountError: If email, username or phone is taken
            AccountStoreError: On any other driver failure
        """
        try:
            await self.collection.insert_one(account.to_document())
        except DuplicateKeyError as e:
            raise DuplicateAccountError(str(e)) from e
        except PyMongoError as e:
            raise AccountStoreError(str(e)) from e

    async def ensure_indexes(self) -> None:
        """Create one unique index per identity field. Safe to repeat."""
        try:
            for field in user_db.UNIQUE_FIELDS:
                await self.collection.create_index(field, unique=True)
        except PyMongoError as e:
            raise AccountStoreError(f"Index creation failed: {e}") from e

    async def ping(self) -> None:
        """Round-trip to the server."""
        try:
            await self.collection.database.client.admin.command("ping")
        except PyMongoError as e:
            raise AccountStoreError(str(e)) from e

    async def _find_one(self, query: dict) -> Account:
        try:
            doc = await self.collection.find_one(query)
        except PyMongoError as e:
            raise AccountStoreError(str(e)) from e

        if doc is None:
            raise AccountNotFoundError()
        return Account.from_document(doc)


async def connect_account_store(
    settings: Settings,
) -> tuple[AsyncIOMotorClient, AccountStore]:
    """
    Connect to MongoDB and provision indexes before serving traffic.

    The whole step is bounded by ``settings.startup_timeout_seconds``.

    Returns:
        The client (owned by the caller, who must close it) and the store

    Raises:
        AccountStoreError: If the URI is malformed, the server is
            unreachable, index creation fails or the timeout expires
    """
    try:
        client = create_mongo_client(settings)
    except PyMongoError as e:
        raise AccountStoreError(f"Invalid MongoDB configuration: {e}") from e
    store = AccountStore(get_users_collection(client, settings))

    async def _provision() -> None:
        await store.ping()
        await store.ensure_indexes()

    try:
        await asyncio.wait_for(_provision(), timeout=settings.startup_timeout_seconds)
    except asyncio.TimeoutError as e:
        client.close()
        raise AccountStoreError(
            f"MongoDB not ready after {settings.startup_timeout_seconds}s"
        ) from e
    except AccountStoreError:
        client.close()
        raise

    logger.info(
        f"Connected to MongoDB, indexes ready on "
        f"{settings.users_db_name}.{settings.users_collection}"
    )
    return client, store
