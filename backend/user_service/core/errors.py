"""
Client-facing error taxonomy.

Every error a handler can return to a caller is a ``ServiceError`` carrying
an RPC status code. Validation and conflict messages are passed through
verbatim; internal errors only ever carry a generic message, the real cause
is logged where it happens.
"""
from enum import Enum


class StatusCode(str, Enum):
    """RPC status codes used by the service."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


# HTTP status the transport uses for each RPC status code
HTTP_STATUS = {
    StatusCode.INVALID_ARGUMENT: 400,
    StatusCode.ALREADY_EXISTS: 409,
    StatusCode.NOT_FOUND: 404,
    StatusCode.INTERNAL: 500,
}


class ValidationRule(str, Enum):
    """Registration rules, listed in the order they are checked."""
    EMPTY_FULL_NAME = "EmptyFullName"
    USERNAME_TOO_SHORT = "UsernameTooShort"
    USERNAME_INVALID_CHARS = "UsernameInvalidChars"
    INVALID_EMAIL_FORMAT = "InvalidEmailFormat"
    INVALID_PHONE_FORMAT = "InvalidPhoneFormat"


RULE_MESSAGES = {
    ValidationRule.EMPTY_FULL_NAME: "full name is required",
    ValidationRule.USERNAME_TOO_SHORT: "username must be at least 4 characters",
    ValidationRule.USERNAME_INVALID_CHARS: "username can only contain letters and numbers",
    ValidationRule.INVALID_EMAIL_FORMAT: "invalid email format",
    ValidationRule.INVALID_PHONE_FORMAT: "phone must be in 254XXXXXXXXX format (12 digits)",
}


class ServiceError(Exception):
    """Base class for errors that cross the RPC boundary."""

    code: StatusCode = StatusCode.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def http_status(self) -> int:
        return HTTP_STATUS[self.code]

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}


class ValidationError(ServiceError):
    """Registration input broke one of the validation rules."""

    code = StatusCode.INVALID_ARGUMENT

    def __init__(self, rule: ValidationRule):
        super().__init__(RULE_MESSAGES[rule])
        self.rule = rule


class ConflictError(ServiceError):
    """An account with one of the identity fields already exists."""

    code = StatusCode.ALREADY_EXISTS


class NotFoundError(ServiceError):
    """No account matched the lookup."""

    code = StatusCode.NOT_FOUND


class InternalError(ServiceError):
    """Store or connectivity failure. Safe for the caller to retry."""

    code = StatusCode.INTERNAL
