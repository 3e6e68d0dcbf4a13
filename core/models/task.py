# =============================================================================
# core/models/task.py - Task Schemas
# =============================================================================
# A task is a chore owned by one user (its parent). Descriptions are unique
# per parent and at least 4 characters long.
# =============================================================================

from uuid import UUID

from pydantic import BaseModel, Field

DESCRIPTION_MIN_LENGTH = 4


class TaskCreateRequest(BaseModel):
    """
    Schema for creating a task.

    Example:
        {"description": "Take out the trash"}
    """
    description: str = Field(
        ...,
        min_length=DESCRIPTION_MIN_LENGTH,
        description="Task description (unique per user)"
    )


class TaskUpdateRequest(BaseModel):
    """
    Schema for changing a task's description.

    Example:
        {"id": "61b016a6-8081-4a00-9379-f1e4c0000000", "description": "Walk the dog"}
    """
    id: UUID = Field(..., description="Task to update")
    description: str = Field(
        ...,
        min_length=DESCRIPTION_MIN_LENGTH,
        description="New description"
    )


class TaskSummary(BaseModel):
    """Narrowed projection returned by task listings and updates."""
    id: UUID
    description: str
