# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from uuid import UUID
from typing import Optional


class AuthUser(BaseModel):
    """
    Authenticated caller, resolved from the bearer token and the users table.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None


class TokenPayload(BaseModel):
    """Decoded access token claims."""
    sub: str  # User ID
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
