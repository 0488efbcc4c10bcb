"""
Dependencies for dependency injection in routes.
"""
from user_service.dependencies.services import get_account_store, get_user_service

__all__ = [
    "get_account_store",
    "get_user_service",
]
