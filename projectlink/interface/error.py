"""Mapping of errors to JSON responses.

Every error body has the shape ``{"message": str}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from projectlink.config import Settings
from projectlink.domain.error import (
    AuthenticationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    if isinstance(error, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(error, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    # ValidationError, ConflictError and anything else from the domain
    return status.HTTP_400_BAD_REQUEST


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install exception handlers producing the ``{"message"}`` envelope.

    Args:
        app: FastAPI application
        settings: Application settings (controls exposure of error details)
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        code = status_for(exc)
        logfire.warn(
            "Domain error",
            error_type=type(exc).__name__,
            error=str(exc),
            status_code=code,
            path=request.url.path,
        )
        return JSONResponse(status_code=code, content={"message": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            error_type=type(exc).__name__,
            error=str(exc),
            path=request.url.path,
            _exc_info=exc,
        )
        content = {"message": "Internal server error"}
        if settings.expose_error_details:
            content["error"] = str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )
