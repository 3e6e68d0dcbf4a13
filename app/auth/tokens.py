# =============================================================================
# app/auth/tokens.py - Access Tokens
# =============================================================================
# Issues and verifies the signed bearer tokens returned by login.
# Tokens carry the user id as subject and expire after TOKEN_EXPIRE_HOURS.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

from fastapi import HTTPException, status
from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import ValidationError

from app.auth.models import TokenPayload
from app.config import Settings

logger = logging.getLogger(__name__)


def create_access_token(
    user_id: str | UUID,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """
    Sign an access token for a user.

    Args:
        user_id: Subject of the token
        settings: Provides SECRET_KEY, JWT_ALGORITHM and TOKEN_EXPIRE_HOURS
        now: Issue time (defaults to current UTC time)

    Returns:
        Encoded JWT string
    """
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + timedelta(hours=settings.TOKEN_EXPIRE_HOURS)).timestamp()),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_access_token(token: str, settings: Settings) -> TokenPayload:
    """
    Verify a token's signature and expiry.

    Raises:
        HTTPException: 401 if the token is expired, malformed or forged
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        logger.warning("Access token has expired")
        raise unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"Access token validation failed: {e}")
        raise unauthorized("Invalid token")

    try:
        return TokenPayload(**payload)
    except ValidationError:
        logger.warning("Access token is missing required claims")
        raise unauthorized("Invalid token: missing claims")
