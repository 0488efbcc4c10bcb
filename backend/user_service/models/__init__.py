"""
Pydantic models for database documents.
"""
from user_service.models.account import Account

__all__ = ["Account"]
