"""Translation of errors into JSON ``{"message": ...}`` responses."""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stackit.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ReferentialError,
)


def http_error(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the client.

    ValidationError and any other domain error become 400 with the
    error text as the message.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, (NotFoundError, ReferentialError)):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Not authorized to {error.action} this {error.resource}",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    logfire.warn(
        "Request validation failed", path=request.url.path, field=field, error=message
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": f"{field}: {message}" if field else message},
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error response as ``{"message": ...}``.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
