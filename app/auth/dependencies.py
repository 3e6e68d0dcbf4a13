# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# The bearer token is decoded and its subject looked up in the users table,
# so tokens of deleted users stop working immediately.
#
# Usage:
#   from app.auth import CurrentUser
#
#   @router.get("/protected")
#   async def protected(user: CurrentUser):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.auth.models import AuthUser
from app.auth.tokens import decode_access_token, unauthorized
from app.context import AppContext, get_context
from core.repositories import UserRepository

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor; missing headers are reported as 401 below
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    ctx: AppContext = Depends(get_context),
) -> AuthUser:
    """
    Resolve the authenticated user from the Authorization header.

    This dependency:
    1. Extracts the Bearer token from the Authorization header
    2. Verifies the signature and expiry
    3. Loads the user named by the token's subject

    Raises:
        HTTPException: 401 if the header is missing, the token is invalid
            or expired, or the user no longer exists
    """
    if credentials is None:
        raise unauthorized("Not authenticated")

    payload = decode_access_token(credentials.credentials, ctx.settings)

    try:
        user_id = UUID(payload.sub)
    except ValueError:
        logger.warning(f"Invalid UUID in token: {payload.sub}")
        raise unauthorized("Invalid token: malformed user ID")

    user = UserRepository(ctx.db).find_by_id(user_id)
    if not user:
        logger.warning(f"Token subject not found: {payload.sub}")
        raise unauthorized("Invalid token: user not found")

    logger.debug(f"Authenticated user: {user['id']}")
    return AuthUser(id=user["id"], email=user.get("email"))


CurrentUser = Annotated[AuthUser, Depends(get_current_user)]
