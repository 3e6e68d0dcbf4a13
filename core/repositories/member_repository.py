# =============================================================================
# core/repositories/member_repository.py - Members Table
# =============================================================================

from typing import Any
from uuid import UUID

from lib.utils import normalize_uuid

from .base_repository import BaseRepository

MEMBER_COLUMNS = "id, name, photo, birthdate, allowance"


class MemberRepository(BaseRepository):
    """Repository for the members table."""

    table_name = "members"

    def find_by_parent_id(self, parent_id: str | UUID) -> list[dict[str, Any]]:
        """List a user's members, oldest first, without the parent column."""
        response = (
            self.table()
            .select(MEMBER_COLUMNS)
            .eq("parent_id", normalize_uuid(parent_id))
            .order("created_at")
            .execute()
        )
        return response.data or []
