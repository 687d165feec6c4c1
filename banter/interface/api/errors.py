"""Error responses for the HTTP API.

Every failure is rendered as ``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from banter.domain.error import (
    BusinessRuleViolationError,
    ContentDeletedException,
    DomainError,
    InvalidArgumentError,
    NotAuthorizedError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthenticatedError,
)

ERROR_STATUS: dict[type[DomainError], int] = {
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    BusinessRuleViolationError: status.HTTP_403_FORBIDDEN,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ContentDeletedException: status.HTTP_404_NOT_FOUND,
    ServiceUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its HTTP status."""
    status_code = next(
        (
            code
            for error_type, code in ERROR_STATUS.items()
            if isinstance(exc, error_type)
        ),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
        )

    # Don't leak IDs from authorization failures
    message = (
        "Not authorized to modify this comment"
        if isinstance(exc, NotAuthorizedError)
        else str(exc)
    )
    return error_response(status_code, message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 with the first problem."""
    errors = exc.errors()
    if not errors:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
