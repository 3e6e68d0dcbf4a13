# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.responses import RouteResponse

logger = logging.getLogger(__name__)


class ChoreBankException(Exception):
    """
    Base exception for the ChoreBank API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CHOREBANK_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

@dataclass(frozen=True)
class FieldError:
    """A single failing field and the message shown to the client."""
    field: str
    message: str


class RequestValidationFailed(ChoreBankException):
    """Raised when one or more request fields fail validation."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(
            message="Validation error",
            code="VALIDATION_ERROR",
            status_code=422,
        )
        self.errors = list(errors)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = [{"field": e.field, "message": e.message} for e in self.errors]
        return result


def field_errors(errors: Sequence[dict[str, Any]]) -> list[FieldError]:
    """
    Flatten pydantic error dicts to FieldError items.

    The request part prefix (body, path, query, header) is dropped and
    nested locations are joined with dots: ("body", "email") -> "email".
    """
    result = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query", "header"):
            loc = loc[1:]
        result.append(FieldError(field=".".join(loc) or "body", message=error.get("msg", "Invalid value")))
    return result


# =============================================================================
# Upload Exceptions
# =============================================================================

class StorageWriteError(ChoreBankException):
    """Raised when an uploaded photo cannot be written to disk."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Failed to store uploaded file: {error}",
            code="STORAGE_WRITE_ERROR",
            status_code=500,
            suggestion="Check that IMAGES_PATH exists and is writable",
            details={"path": path}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def chorebank_exception_handler(
    request: Request,
    exc: ChoreBankException
) -> JSONResponse:
    """
    Convert ChoreBankException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - errors: Failing fields (validation errors only)
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request model validation errors.

    Flattens pydantic errors to the same field/message list the
    validation chains produce, so clients see one error format.
    """
    return RouteResponse.validation_error(field_errors(exc.errors()))


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, auth failures) in the error envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return RouteResponse.not_found()

    codes = {
        status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
        status.HTTP_403_FORBIDDEN: "FORBIDDEN",
        status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    }
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": codes.get(exc.status_code, "HTTP_ERROR")},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return RouteResponse.server_error()
