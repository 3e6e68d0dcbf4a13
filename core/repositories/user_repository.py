# =============================================================================
# core/repositories/user_repository.py - Users Table
# =============================================================================

from typing import Any

from .base_repository import BaseRepository


class UserRepository(BaseRepository):
    """Repository for the users table."""

    table_name = "users"

    def find_by_email(self, email: str | None) -> dict[str, Any] | None:
        """
        Fetch a user by email.

        Returns:
            User row (including the password hash), or None
        """
        if not email:
            return None

        response = (
            self.table()
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None
