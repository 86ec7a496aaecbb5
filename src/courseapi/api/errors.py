"""Exception handlers translating store errors into HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from courseapi.api.models import ErrorResponse
from courseapi.logging import get_logger
from courseapi.store import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = get_logger("api")


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the store-error to status-code mapping on an app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ConflictError)
    async def conflict_handler(_request: Request, exc: ConflictError) -> JSONResponse:
        return error_response(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error(
            "Database error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
