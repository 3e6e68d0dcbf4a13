# =============================================================================
# app/routing.py - Explicit Route Tables
# =============================================================================
# Routers are built from plain lists of Route entries instead of decorators,
# so the (method, path) -> handler mapping of each resource is a value that
# can be read in tests and printed at startup.
#
# Usage:
#   ROUTES = [
#       Route("GET", "", list_tasks, summary="List tasks"),
#       Route("DELETE", "/{task_id}", delete_task),
#   ]
#   router = build_router(ROUTES, prefix="/v1/user/tasks", tags=["Tasks"])
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence

from fastapi import APIRouter
from pydantic import BaseModel
from starlette import status

from app.responses import ErrorResponse


class Endpoints(str, Enum):
    """Base paths of the versioned resources."""
    USER_V1 = "/v1/user"
    TASKS_V1 = "/v1/user/tasks"
    MEMBERS_V1 = "/v1/user/members"


# Error responses every validated route can produce
VALIDATED_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {"model": ErrorResponse, "description": "Validation error"},
}

PROTECTED_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
    **VALIDATED_RESPONSES,
}


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """
    OpenAPI request body for routes whose validator reads the raw JSON
    object and parses it against `model` itself.
    """
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@dataclass(frozen=True)
class Route:
    """One endpoint: HTTP method, path relative to the router prefix, handler."""
    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int = status.HTTP_200_OK
    summary: str | None = None
    response_model: Any = None
    dependencies: Sequence[Any] = ()
    responses: dict[int | str, dict[str, Any]] = field(default_factory=dict)
    openapi_extra: dict[str, Any] | None = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.method, self.path)


def build_router(
    routes: Sequence[Route],
    prefix: str = "",
    tags: list[str | Enum] | None = None,
) -> APIRouter:
    """
    Register every route of a table on a new APIRouter.

    Raises:
        ValueError: If two routes share the same method and path
    """
    seen: set[tuple[str, str]] = set()
    router = APIRouter(prefix=prefix, tags=tags)

    for route in routes:
        if route.key in seen:
            raise ValueError(f"Duplicate route {route.method} {prefix}{route.path}")
        seen.add(route.key)

        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            summary=route.summary,
            response_model=route.response_model,
            dependencies=list(route.dependencies),
            responses=route.responses,
            openapi_extra=route.openapi_extra,
        )

    return router
