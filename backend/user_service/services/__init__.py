"""
Service layer for business logic.
"""
from user_service.services.account_store import AccountStore, connect_account_store
from user_service.services.user_service import UserService

__all__ = [
    "AccountStore",
    "UserService",
    "connect_account_store",
]
