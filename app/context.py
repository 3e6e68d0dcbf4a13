# =============================================================================
# app/context.py - Application Context
# =============================================================================
# Everything a request handler needs from the process: settings, the
# database client, the password hashing context and the upload store.
#
# One AppContext is built by create_app() and stored on app.state; handlers
# and validators receive it through the get_context dependency.
#
# Usage:
#   @router.get("/things")
#   async def list_things(ctx: ContextDep):
#       return TaskRepository(ctx.db).get_by_parent_id(...)
# =============================================================================

from __future__ import annotations

from typing import Annotated, Callable

from fastapi import Depends, Request
from passlib.context import CryptContext
from supabase import Client

from app.config import Settings
from core.services.upload_service import UploadService
from lib.security import build_password_context
from lib.supabase_client import SupabaseClient


class AppContext:
    """
    Per-application state shared by all requests.

    The Supabase client is created on first use so the app can be built
    (and its routes inspected) without database credentials being valid.
    """

    def __init__(
        self,
        settings: Settings,
        db: Client | None = None,
        client_factory: Callable[[Settings], Client] = SupabaseClient.create,
    ):
        self.settings = settings
        self._db = db
        self._client_factory = client_factory
        self.passwords: CryptContext = build_password_context(settings.PASSWORD_HASH_ROUNDS)
        self.uploads = UploadService(settings.IMAGES_PATH)

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = self._client_factory(self.settings)
        return self._db


def get_context(request: Request) -> AppContext:
    """Return the AppContext of the application serving this request."""
    return request.app.state.context


# Type alias for dependency injection
ContextDep = Annotated[AppContext, Depends(get_context)]
