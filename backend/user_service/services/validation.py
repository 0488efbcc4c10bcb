"""
Normalization and validation of registration input.

All functions here are pure. Normalizers are idempotent: feeding a
normalized value back in returns it unchanged.
"""
import unicodedata
from dataclasses import dataclass

from user_service.core.errors import ValidationError, ValidationRule

PHONE_COUNTRY_PREFIX = "254"
PHONE_LENGTH = 12
MIN_USERNAME_LENGTH = 4


@dataclass(frozen=True)
class NormalizedRegistration:
    """Registration identity fields after normalization."""
    full_name: str
    user_name: str
    email: str
    phone: str


def normalize_username(value: str) -> str:
    """Trim surrounding whitespace and lower-case."""
    return value.strip().lower()


def normalize_email(value: str) -> str:
    """Trim surrounding whitespace and lower-case."""
    return value.strip().lower()


def normalize_phone(value: str) -> str:
    """
    Canonicalize a Kenyan mobile number to ``254XXXXXXXXX``.

    Local forms ``07XXXXXXXX`` and ``7XXXXXXXX`` get the country prefix.
    Anything else is returned as-is (minus spaces) and is left for
    ``validate_registration`` to reject.
    """
    phone = value.strip().replace(" ", "")

    if phone.startswith("0") and len(phone) == 10:
        return PHONE_COUNTRY_PREFIX + phone[1:]
    if phone.startswith("7") and len(phone) == 9:
        return PHONE_COUNTRY_PREFIX + phone
    return phone


def is_alphanumeric(value: str) -> bool:
    """True if every character is a Unicode letter or number."""
    return all(unicodedata.category(ch)[0] in ("L", "N") for ch in value)


def validate_registration(
    full_name: str,
    user_name: str,
    email: str,
    phone: str,
) -> None:
    """
    Check registration fields, raising on the first broken rule.

    Rules run in a fixed order so the reported error is deterministic.

    Raises:
        ValidationError: Carrying the violated ``ValidationRule``
    """
    if not full_name.strip():
        raise ValidationError(ValidationRule.EMPTY_FULL_NAME)

    # Checked in stored form; lower() can add combining marks
    username = normalize_username(user_name)
    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError(ValidationRule.USERNAME_TOO_SHORT)
    if not is_alphanumeric(username):
        raise ValidationError(ValidationRule.USERNAME_INVALID_CHARS)

    trimmed_email = email.strip()
    if "@" not in trimmed_email or "." not in trimmed_email:
        raise ValidationError(ValidationRule.INVALID_EMAIL_FORMAT)

    normalized_phone = normalize_phone(phone)
    if (
        len(normalized_phone) != PHONE_LENGTH
        or not normalized_phone.startswith(PHONE_COUNTRY_PREFIX)
    ):
        raise ValidationError(ValidationRule.INVALID_PHONE_FORMAT)


def normalize_registration(
    full_name: str,
    user_name: str,
    email: str,
    phone: str,
) -> NormalizedRegistration:
    """Validate the raw fields and return their normalized form."""
    validate_registration(full_name, user_name, email, phone)
    return NormalizedRegistration(
        full_name=full_name.strip(),
        user_name=normalize_username(user_name),
        email=normalize_email(email),
        phone=normalize_phone(phone),
    )
