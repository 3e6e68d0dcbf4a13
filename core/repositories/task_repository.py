# =============================================================================
# core/repositories/task_repository.py - Tasks Table
# =============================================================================

from typing import Any
from uuid import UUID

from lib.utils import normalize_uuid

from .base_repository import BaseRepository


class TaskRepository(BaseRepository):
    """Repository for the tasks table."""

    table_name = "tasks"

    def get_by_parent_id(self, parent_id: str | UUID) -> list[dict[str, Any]]:
        """
        List a user's tasks, oldest first.

        Returns:
            Rows narrowed to id and description
        """
        response = (
            self.table()
            .select("id, description")
            .eq("parent_id", normalize_uuid(parent_id))
            .order("created_at")
            .execute()
        )
        return response.data or []

    def find_by_description(
        self,
        parent_id: str | UUID,
        description: str,
    ) -> dict[str, Any] | None:
        """Fetch the user's task with exactly this description, if any."""
        response = (
            self.table()
            .select("*")
            .eq("parent_id", normalize_uuid(parent_id))
            .eq("description", description)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None
