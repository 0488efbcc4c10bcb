"""
UserService message schemas.

Field names follow the service's wire messages. Every field defaults to an
empty value so a partially filled request reaches validation instead of
being rejected by the transport.
"""
from pydantic import BaseModel, Field

from user_service.core.errors import StatusCode


class RegisterMessageRequest(BaseModel):
    """RegisterUser request."""
    full_name: str = Field(default="", description="Full name")
    user_name: str = Field(default="", description="Username (min 4, letters and digits)")
    email_address: str = Field(default="", description="Email address")
    phone_number: str = Field(default="", description="Phone, 07..., 7... or 254...")
    password: str = Field(default="", description="Password")


class RegisterMessageResponse(BaseModel):
    """RegisterUser response."""
    user_name: str = Field(..., description="Stored (normalized) username")
    message: str = Field(default="Registered successfully")
    success: bool = Field(default=True)


class LoginMessageRequest(BaseModel):
    """LoginUser request."""
    email: str = Field(default="", description="Account email")


class LoginMessageResponse(BaseModel):
    """LoginUser response."""
    email: str = Field(..., description="Account email")
    user_name: str = Field(..., description="Account username")
    password: str = Field(..., description="Stored password hash")


class ErrorResponse(BaseModel):
    """Body returned for any failed call."""
    code: StatusCode
    message: str
