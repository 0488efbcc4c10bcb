"""
Request and response messages for the RPC operations.
"""
from user_service.schemas.user import (
    ErrorResponse,
    LoginMessageRequest,
    LoginMessageResponse,
    RegisterMessageRequest,
    RegisterMessageResponse,
)

__all__ = [
    "RegisterMessageRequest",
    "RegisterMessageResponse",
    "LoginMessageRequest",
    "LoginMessageResponse",
    "ErrorResponse",
]
