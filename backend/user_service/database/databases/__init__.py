"""
Database definitions and collection constants.
"""
from user_service.database.databases import user_db

__all__ = ["user_db"]
