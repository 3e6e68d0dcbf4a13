# =============================================================================
# core/repositories/__init__.py - Repository Exports
# =============================================================================

from .base_repository import BaseRepository
from .member_repository import MemberRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "MemberRepository",
    "TaskRepository",
    "UserRepository",
]
