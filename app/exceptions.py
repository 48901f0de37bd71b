# =============================================================================
# app/exceptions.py - Error Taxonomy and Exception Handlers
# =============================================================================
# Every failure is classified into one ErrorKind and rendered through a single
# translation point into the envelope:
#
#   {"error": {"name": "NotFoundError", "message": "...", "stack": [...]}}
#
# "stack" is only present in the development environment.
# =============================================================================

import logging
import traceback
from enum import Enum
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """
    Classified failure kinds.

    The value is the machine-readable name sent to clients in `error.name`.
    """
    NOT_FOUND = "NotFoundError"
    VALIDATION = "ValidationError"
    AUTHENTICATION = "AuthenticationError"
    INTERNAL = "InternalServerError"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.INTERNAL: 500,
}


class ProductAPIError(Exception):
    """
    The single raised error type of the API.

    Carries an ErrorKind tag instead of relying on a subclass hierarchy; the
    translator reads `kind` to pick the status code and name.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @classmethod
    def not_found(cls, message: str) -> "ProductAPIError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: str) -> "ProductAPIError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def authentication(cls, message: str) -> "ProductAPIError":
        return cls(ErrorKind.AUTHENTICATION, message)

    def __repr__(self) -> str:
        return f"ProductAPIError({self.kind.value}, {self.message!r})"


# =============================================================================
# Envelope
# =============================================================================

def error_envelope(
    name: str,
    message: str,
    exc: BaseException | None = None,
    include_stack: bool = False,
) -> dict[str, Any]:
    """
    Build the uniform error body.

    Args:
        name: Machine-readable error name (e.g. "NotFoundError")
        message: Human-readable message
        exc: Exception whose traceback is attached when include_stack is set
        include_stack: Whether to add the "stack" diagnostic field

    Returns:
        {"error": {"name": ..., "message": ..., ["stack": [...]]}}
    """
    error: dict[str, Any] = {"name": name, "message": message}
    if include_stack and exc is not None:
        error["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return {"error": error}


def _include_stack(request: Request) -> bool:
    app_settings = getattr(request.app.state, "settings", None)
    return bool(app_settings and app_settings.is_development)


def _respond(
    request: Request,
    status_code: int,
    name: str,
    message: str,
    exc: BaseException,
) -> JSONResponse:
    if status_code >= 500:
        logger.exception(f"[ERROR] {name}: {message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} failed: {name}: {message}")

    return JSONResponse(
        status_code=status_code,
        content=error_envelope(name, message, exc, include_stack=_include_stack(request)),
    )


# =============================================================================
# Exception Handlers
# =============================================================================

async def product_api_exception_handler(
    request: Request,
    exc: ProductAPIError
) -> JSONResponse:
    """Render a classified ProductAPIError."""
    return _respond(request, exc.status_code, exc.kind.value, exc.message, exc)


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI parameter validation errors (e.g. page=abc).

    Converts them into the Validation kind so clients see one envelope shape.
    """
    problems = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("query", "path", "body", "header")]
        field = ".".join(location) or "request"
        problems.append(f"{field}: {error.get('msg', 'invalid value')}")

    message = ", ".join(problems) or "Invalid request"
    kind = ErrorKind.VALIDATION
    return _respond(request, kind.status_code, kind.value, message, exc)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing errors raised by Starlette.

    No route for the method and path (404/405) is reported as NotFoundError.
    """
    if exc.status_code in (404, 405):
        kind = ErrorKind.NOT_FOUND
        return _respond(request, kind.status_code, kind.value, f"Route {request.url.path} not found", exc)

    return _respond(request, exc.status_code, "HTTPError", str(exc.detail), exc)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions with a generic 500."""
    kind = ErrorKind.INTERNAL
    return _respond(request, kind.status_code, kind.value, "Internal Server Error", exc)
