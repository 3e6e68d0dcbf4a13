# =============================================================================
# app/validators/ - Request Validators
# =============================================================================
# One module per resource. Each public endpoint depends on a validator that
# runs its checks in order and returns an immutable input struct; handlers
# only ever see input that passed every check.
# =============================================================================

from .members import MemberCreateData, MemberDeleteData, MemberUpdateData
from .tasks import TaskCreateData, TaskDeleteData, TaskUpdateData
from .users import LoginData, SignUpData

__all__ = [
    "LoginData",
    "SignUpData",
    "TaskCreateData",
    "TaskDeleteData",
    "TaskUpdateData",
    "MemberCreateData",
    "MemberDeleteData",
    "MemberUpdateData",
]
