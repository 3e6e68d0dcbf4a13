# =============================================================================
# app/validators/common.py - Shared Ownership Rules
# =============================================================================
# Rules used by every resource owned by a user (tasks, members):
# the record must exist, and its parent_id must be the caller. Also the raw
# body type shared by the JSON validators.
# =============================================================================

from dataclasses import dataclass
from typing import Annotated, Any
from uuid import UUID

from fastapi import Body

from app.auth.models import AuthUser
from core.repositories import BaseRepository

# Raw JSON object; validators parse it with core.validation.parse_fields so
# field errors and rule failures are reported in one response
JsonBody = Annotated[dict[str, Any] | None, Body()]


@dataclass
class OwnedRecordState:
    """Scratch state for chains that resolve a user-owned record by id."""
    repository: BaseRepository
    user: AuthUser
    record_id: UUID | None = None
    record: dict[str, Any] | None = None


async def record_exists(state: OwnedRecordState) -> bool:
    """Resolve state.record from state.record_id."""
    if state.record_id is None:
        return False
    state.record = state.repository.find_by_id(state.record_id)
    return state.record is not None


async def record_owned_by_caller(state: OwnedRecordState) -> bool:
    """The resolved record belongs to the authenticated user."""
    if state.record is None:
        return False
    return str(state.record.get("parent_id")) == str(state.user.id)
