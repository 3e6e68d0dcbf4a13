# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT bearer authentication.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import CurrentUser, get_current_user
from app.auth.models import AuthUser, TokenPayload
from app.auth.tokens import create_access_token, decode_access_token

__all__ = [
    "CurrentUser",
    "get_current_user",
    "AuthUser",
    "TokenPayload",
    "create_access_token",
    "decode_access_token",
]
