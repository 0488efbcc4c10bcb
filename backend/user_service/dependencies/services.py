"""
Service dependencies built from state the app lifespan sets up.
"""
from fastapi import Depends, Request

from user_service.core.errors import InternalError
from user_service.services.account_store import AccountStore
from user_service.services.user_service import UserService


def get_account_store(request: Request) -> AccountStore:
    """Dependency to get the AccountStore attached at startup."""
    store = getattr(request.app.state, "account_store", None)
    if store is None:
        raise InternalError("service not ready")
    return store


def get_user_service(store: AccountStore = Depends(get_account_store)) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(store)
