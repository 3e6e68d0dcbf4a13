# =============================================================================
# app/routers/tasks.py - Task CRUD Endpoints
# =============================================================================
# Tasks belong to the authenticated user. All endpoints require a bearer
# token; update and delete are rejected for tasks of other users.
# =============================================================================

import logging

from fastapi.responses import JSONResponse
from starlette import status

from app.auth import CurrentUser
from app.context import ContextDep
from app.responses import ApiResponse, RouteResponse
from app.routing import Endpoints, PROTECTED_RESPONSES, Route, build_router, json_body
from app.validators import TaskCreateData, TaskDeleteData, TaskUpdateData
from core.models import TaskCreateRequest, TaskSummary, TaskUpdateRequest
from core.repositories import TaskRepository

logger = logging.getLogger(__name__)


# =============================================================================
# Handlers
# =============================================================================

async def create_task(data: TaskCreateData, ctx: ContextDep) -> JSONResponse:
    """
    Create a task.

    The description needs at least 4 characters and must not match
    another task of the same user.
    """
    TaskRepository(ctx.db).insert({
        "description": data.description,
        "parent_id": str(data.user.id),
    })
    return RouteResponse.created()


async def list_tasks(user: CurrentUser, ctx: ContextDep) -> JSONResponse:
    """Return the user's tasks as `{id, description}` items."""
    rows = TaskRepository(ctx.db).get_by_parent_id(user.id)
    return RouteResponse.success([TaskSummary(**row) for row in rows])


async def update_task(data: TaskUpdateData, ctx: ContextDep) -> JSONResponse:
    """Change the description of the task with the given id."""
    task = {**data.task, "description": data.description}

    saved = TaskRepository(ctx.db).update(task)

    return RouteResponse.success(TaskSummary(id=saved["id"], description=saved["description"]))


async def delete_task(data: TaskDeleteData, ctx: ContextDep) -> JSONResponse:
    """Delete a task permanently."""
    TaskRepository(ctx.db).delete(data.task["id"])
    return RouteResponse.success_empty()


# =============================================================================
# Route Table
# =============================================================================

ROUTES = [
    Route(
        "POST", "", create_task,
        status_code=status.HTTP_201_CREATED,
        summary="Create a task",
        response_model=ApiResponse[None],
        responses=PROTECTED_RESPONSES,
        openapi_extra=json_body(TaskCreateRequest),
    ),
    Route(
        "GET", "", list_tasks,
        summary="List the user's tasks",
        response_model=ApiResponse[list[TaskSummary]],
        responses=PROTECTED_RESPONSES,
    ),
    Route(
        "PUT", "", update_task,
        summary="Update the task with the given id",
        response_model=ApiResponse[TaskSummary],
        responses=PROTECTED_RESPONSES,
        openapi_extra=json_body(TaskUpdateRequest),
    ),
    Route(
        "DELETE", "/{task_id}", delete_task,
        summary="Delete a task permanently",
        response_model=ApiResponse[None],
        responses=PROTECTED_RESPONSES,
    ),
]

router = build_router(ROUTES, prefix=Endpoints.TASKS_V1.value, tags=["Tasks"])
