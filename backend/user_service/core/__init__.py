"""
Core module - error taxonomy shared by services and routers.
"""
from user_service.core.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    ServiceError,
    StatusCode,
    ValidationError,
    ValidationRule,
)

__all__ = [
    "ServiceError",
    "StatusCode",
    "ValidationError",
    "ValidationRule",
    "ConflictError",
    "NotFoundError",
    "InternalError",
]
