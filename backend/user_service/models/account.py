"""
Account model for the userdb.users collection.
"""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Account(BaseModel):
    """
    Account document model.

    ``email``, ``user_name`` and ``phone`` are each covered by their own
    unique index.
    """
    full_name: str = Field(..., description="Trimmed full name")
    user_name: str = Field(..., description="Lower-cased unique username")
    email: str = Field(..., description="Lower-cased unique email address")
    phone: str = Field(..., description="Unique phone in 254XXXXXXXXX form")
    # Stored exactly as supplied at registration, no hashing happens yet
    password_hash: str = Field(..., description="Credential material")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def to_document(self) -> dict[str, Any]:
        """Serialize to a MongoDB document."""
        return self.model_dump()

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Account":
        """Build from a MongoDB document, ignoring ``_id``."""
        data = {key: value for key, value in doc.items() if key != "_id"}
        return cls(**data)
