# =============================================================================
# app/responses.py - Response Envelopes
# =============================================================================
# Single translation point between handler results and the wire format.
# Every outcome maps to a fixed status code and a consistent body shape.
# =============================================================================

from typing import Any, Generic, Sequence, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette import status

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope, used for OpenAPI documentation."""
    data: T | None = None


class ErrorField(BaseModel):
    """One failing field in a validation error response."""
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope, used for OpenAPI documentation."""
    detail: str
    code: str
    errors: list[ErrorField] | None = None


class RouteResponse:
    """Builds the JSON responses returned by every handler."""

    @staticmethod
    def success(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"data": jsonable_encoder(data)})

    @staticmethod
    def success_empty() -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"data": None})

    @staticmethod
    def created() -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_201_CREATED, content={"data": None})

    @staticmethod
    def not_found() -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Route not found", "code": "NOT_FOUND"},
        )

    @staticmethod
    def server_error() -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
        )

    @staticmethod
    def validation_error(errors: Sequence[Any]) -> JSONResponse:
        """
        Report every failing field in one response.

        Args:
            errors: FieldError items (anything with `field` and `message`)
        """
        return JSONResponse(
            status_code=422,
            content={
                "detail": "Validation error",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": e.field, "message": e.message} for e in errors],
            },
        )
