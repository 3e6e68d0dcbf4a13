# =============================================================================
# app/validators/tasks.py - Task Validators
# =============================================================================
# Every task endpoint requires a valid bearer token (resolved by
# CurrentUser before the chains run). Then, in order:
#
#   create: description unique for the caller
#   update: task exists -> task owned by caller -> description unique
#   delete: task exists -> task owned by caller
#
# Description length is checked against the request models first; length
# errors and rule failures are reported together.
# =============================================================================

from dataclasses import dataclass
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Path

from app.auth import AuthUser, CurrentUser
from app.context import ContextDep
from app.validators.common import JsonBody, OwnedRecordState, record_exists, record_owned_by_caller
from core.models import TaskCreateRequest, TaskUpdateRequest
from core.repositories import TaskRepository
from core.validation import Rule, ValidationChain, parse_fields


# =============================================================================
# Validated Inputs
# =============================================================================

@dataclass(frozen=True)
class TaskCreateInput:
    user: AuthUser
    description: str


@dataclass(frozen=True)
class TaskUpdateInput:
    user: AuthUser
    task: dict[str, Any]
    description: str


@dataclass(frozen=True)
class TaskDeleteInput:
    user: AuthUser
    task: dict[str, Any]


# =============================================================================
# Rules
# =============================================================================

@dataclass
class TaskState(OwnedRecordState):
    description: str | None = None


async def description_unique(state: TaskState) -> bool:
    """
    No other task of the caller has exactly this description.

    The task being edited doesn't count, so saving an unchanged
    description is allowed.
    """
    match = state.repository.find_by_description(state.user.id, state.description)
    if match is None:
        return True
    return state.record is not None and str(match["id"]) == str(state.record["id"])


TASK_NOT_FOUND = "Task not found"
TASK_NOT_OWNED = "Task does not belong to the user"
TASK_DUPLICATE = "A task with this description already exists"

CREATE_CHAIN = ValidationChain(
    Rule("description", description_unique, TASK_DUPLICATE),
)

UPDATE_CHAIN = ValidationChain(
    Rule("id", record_exists, TASK_NOT_FOUND),
    Rule("parent_id", record_owned_by_caller, TASK_NOT_OWNED, requires=("id",)),
    Rule("description", description_unique, TASK_DUPLICATE),
)

DELETE_CHAIN = ValidationChain(
    Rule("id", record_exists, TASK_NOT_FOUND),
    Rule("parent_id", record_owned_by_caller, TASK_NOT_OWNED, requires=("id",)),
)


# =============================================================================
# Dependencies
# =============================================================================

async def validate_task_create(
    user: CurrentUser,
    ctx: ContextDep,
    body: JsonBody = None,
) -> TaskCreateInput:
    values, errors = parse_fields(TaskCreateRequest, body)
    state = TaskState(repository=TaskRepository(ctx.db), user=user, description=values.get("description"))
    await CREATE_CHAIN.run(state, errors)
    return TaskCreateInput(user=user, description=state.description)


async def validate_task_update(
    user: CurrentUser,
    ctx: ContextDep,
    body: JsonBody = None,
) -> TaskUpdateInput:
    values, errors = parse_fields(TaskUpdateRequest, body)
    state = TaskState(
        repository=TaskRepository(ctx.db),
        user=user,
        record_id=values.get("id"),
        description=values.get("description"),
    )
    await UPDATE_CHAIN.run(state, errors)
    return TaskUpdateInput(user=user, task=state.record, description=state.description)


async def validate_task_delete(
    task_id: Annotated[UUID, Path(description="Task UUID")],
    user: CurrentUser,
    ctx: ContextDep,
) -> TaskDeleteInput:
    state = TaskState(repository=TaskRepository(ctx.db), user=user, record_id=task_id)
    await DELETE_CHAIN.run(state)
    return TaskDeleteInput(user=user, task=state.record)


TaskCreateData = Annotated[TaskCreateInput, Depends(validate_task_create)]
TaskUpdateData = Annotated[TaskUpdateInput, Depends(validate_task_update)]
TaskDeleteData = Annotated[TaskDeleteInput, Depends(validate_task_delete)]
