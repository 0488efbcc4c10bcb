"""
User Service - FastAPI Application

Serves the UserService RPC operations (RegisterUser, LoginUser) over HTTP,
backed by a MongoDB users collection.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_service import __version__
from user_service.config import Settings, get_settings
from user_service.core.errors import HTTP_STATUS, ServiceError, StatusCode
from user_service.logging_config import configure_logging
from user_service.routers import health, users
from user_service.services.account_store import AccountStore, connect_account_store

logger = logging.getLogger("user_service")


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a ServiceError as ``{"code", "message"}`` with its HTTP status."""
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render a malformed request body as INVALID_ARGUMENT instead of a 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or "body"
        message = f"invalid {field}: {first.get('msg', 'malformed value')}"
    else:
        message = "malformed request"
    return JSONResponse(
        status_code=HTTP_STATUS[StatusCode.INVALID_ARGUMENT],
        content={"code": StatusCode.INVALID_ARGUMENT.value, "message": message},
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[AccountStore] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use, defaults to ``get_settings()``
        store: Ready-made AccountStore. When given, startup skips connecting
            to MongoDB and the caller keeps ownership of the connection.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Connect to MongoDB (bounded by startup_timeout_seconds)
        - Create the unique indexes

        Any startup failure propagates and stops the server.

        Shutdown:
        - Close the MongoDB client
        """
        configure_logging(settings.log_level)
        logger.info("Starting up User Service...")

        client = None
        if store is None:
            client, app.state.account_store = await connect_account_store(settings)
        else:
            app.state.account_store = store

        logger.info("User Service ready")
        yield

        logger.info("Shutting down User Service...")
        app.state.account_store = None
        if client is not None:
            client.close()
            logger.info("Database connection closed")

    app = FastAPI(
        title="User Service",
        description="Account registration and login backed by MongoDB.",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health.router)
    app.include_router(users.router)

    return app


def run() -> None:
    """Start the server on the configured listen address."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
