# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for request validation and
# response shaping:
# - user.py: Sign-up and login schemas
# - task.py: Task create/update schemas and the listing projection
# - member.py: Member create form, update schema and response
#
# These models define the "contract" between API and clients.
# =============================================================================

from .member import MemberCreateForm, MemberResponse, MemberUpdateRequest
from .task import DESCRIPTION_MIN_LENGTH, TaskCreateRequest, TaskSummary, TaskUpdateRequest
from .user import LoginRequest, SignUpRequest

__all__ = [
    # User
    "LoginRequest",
    "SignUpRequest",
    # Task
    "DESCRIPTION_MIN_LENGTH",
    "TaskCreateRequest",
    "TaskSummary",
    "TaskUpdateRequest",
    # Member
    "MemberCreateForm",
    "MemberResponse",
    "MemberUpdateRequest",
]
