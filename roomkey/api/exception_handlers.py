"""
Centralized exception handlers for the FastAPI application.

Every error leaves the API in the same envelope:

    {"success": false, "message": "Human-readable error message"}

Unexpected failures are logged server-side with their traceback; the
response only carries `detail` when APP_ENV is "dev".
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from roomkey.core.config import get_settings
from roomkey.core.errors import AppError, InternalError, Unauthenticated

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    message: str,
    detail: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, object] = {"success": False, "message": message}
    if detail is not None and get_settings().APP_ENV == "dev":
        content["detail"] = detail
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    if exc.status_code >= 500:
        logger.error(
            "Request failed: %s",
            exc.message,
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
    return _error_response(exc.status_code, exc.message, headers=headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {field} {first.get('msg', '')}".strip()
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Route not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(
        "Database error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return _error_response(
        InternalError.status_code,
        InternalError.default_message,
        detail=str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        InternalError.default_message,
        detail=str(exc),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
