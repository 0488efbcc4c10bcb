"""
UserService RPC router.

Each unary operation is a POST to ``/<package>.<Service>/<Method>``. Failures
are raised as ``ServiceError`` and rendered by the handler registered in
``user_service.main``.
"""
from fastapi import APIRouter, Depends

from user_service.dependencies.services import get_user_service
from user_service.schemas.user import (
    ErrorResponse,
    LoginMessageRequest,
    LoginMessageResponse,
    RegisterMessageRequest,
    RegisterMessageResponse,
)
from user_service.services.user_service import UserService

SERVICE_PATH = "/user.UserService"

router = APIRouter(prefix=SERVICE_PATH, tags=["UserService"])


@router.post(
    "/RegisterUser",
    response_model=RegisterMessageResponse,
    summary="Register a new user",
    responses={
        400: {"model": ErrorResponse, "description": "INVALID_ARGUMENT"},
        409: {"model": ErrorResponse, "description": "ALREADY_EXISTS"},
        500: {"model": ErrorResponse, "description": "INTERNAL"},
    },
)
async def register_user(
    body: RegisterMessageRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new user account.

    - **full_name**: Required
    - **user_name**: At least 4 letters or digits (unique, case-insensitive)
    - **email_address**: Must contain "@" and "." (unique, case-insensitive)
    - **phone_number**: 07XXXXXXXX, 7XXXXXXXX or 254XXXXXXXXX (unique)
    """
    return await user_service.register_user(body)


@router.post(
    "/LoginUser",
    response_model=LoginMessageResponse,
    summary="Look up an account by email",
    responses={
        404: {"model": ErrorResponse, "description": "NOT_FOUND"},
        500: {"model": ErrorResponse, "description": "INTERNAL"},
    },
)
async def login_user(
    body: LoginMessageRequest,
    user_service: UserService = Depends(get_user_service),
):
    """Return the username and stored credential for an email."""
    return await user_service.login_user(body)
