"""
UserService handlers for account registration and login.
"""
import logging

from user_service.core.errors import ConflictError, InternalError, NotFoundError
from user_service.models.account import Account, utc_now
from user_service.schemas.user import (
    LoginMessageRequest,
    LoginMessageResponse,
    RegisterMessageRequest,
    RegisterMessageResponse,
)
from user_service.services.account_store import (
    AccountNotFoundError,
    AccountStore,
    AccountStoreError,
    DuplicateAccountError,
)
from user_service.services.validation import normalize_email, normalize_registration

logger = logging.getLogger(__name__)

IDENTITY_TAKEN = "user with this email, username or phone already exists"
DETAILS_TAKEN = "user with these details already exists"
INVALID_CREDENTIALS = "Invalid credentials"


class UserService:
    """Service for registration and login operations."""

    def __init__(self, store: AccountStore):
        """Initialize with the account store."""
        self.store = store

    async def register_user(self, request: RegisterMessageRequest) -> RegisterMessageResponse:
        """
        Register a new account.

        Args:
            request: Raw registration fields

        Returns:
            RegisterMessageResponse with the stored username

        Raises:
            ValidationError: If a field breaks a validation rule
            ConflictError: If email, username or phone is already registered
            InternalError: On store failure
        """
        fields = normalize_registration(
            full_name=request.full_name,
            user_name=request.user_name,
            email=request.email_address,
            phone=request.phone_number,
        )

        # Advisory check for a friendlier error; the unique indexes decide
        try:
            await self.store.find_by_identity(fields.email, fields.user_name, fields.phone)
        except AccountNotFoundError:
            pass
        except AccountStoreError as e:
            logger.error(f"Database error: {e}")
            raise InternalError("internal server error") from e
        else:
            raise ConflictError(IDENTITY_TAKEN)

        now = utc_now()
        account = Account(
            full_name=fields.full_name,
            user_name=fields.user_name,
            email=fields.email,
            phone=fields.phone,
            # TODO: hash before storing once a hashing scheme is chosen
            password_hash=request.password,
            created_at=now,
            updated_at=now,
        )

        try:
            await self.store.insert(account)
        except DuplicateAccountError as e:
            raise ConflictError(DETAILS_TAKEN) from e
        except AccountStoreError as e:
            logger.error(f"Failed to create user: {e}")
            raise InternalError("failed to create user") from e

        logger.info(f"Registered user {account.user_name}")
        return RegisterMessageResponse(
            user_name=account.user_name,
            message="Registered successfully",
            success=True,
        )

    async def login_user(self, request: LoginMessageRequest) -> LoginMessageResponse:
        """
        Look up an account by email.

        A miss is reported with the same generic message whatever the
        reason, so callers cannot probe which emails are registered.

        Raises:
            NotFoundError: If no account has this email
            InternalError: On store failure
        """
        try:
            account = await self.store.find_by_email(normalize_email(request.email))
        except AccountNotFoundError as e:
            raise NotFoundError(INVALID_CREDENTIALS) from e
        except AccountStoreError as e:
            logger.error(f"Database error: {e}")
            raise InternalError("login failed") from e

        return LoginMessageResponse(
            email=account.email,
            user_name=account.user_name,
            password=account.password_hash,
        )
