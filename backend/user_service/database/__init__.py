"""
Database module - MongoDB connection helpers and database definitions.

Connection helpers live in ``user_service.database.connections``. This
package must not import ``user_service.config``, which depends on it.
"""
from user_service.database.databases import user_db

__all__ = ["user_db"]
