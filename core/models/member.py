# =============================================================================
# core/models/member.py - Member Schemas
# =============================================================================
# A member is a household member (usually a child) owned by a user. Members
# carry a photo, a birthdate and a non-negative allowance.
#
# Creation is multipart (the photo is a file field); MemberCreateForm covers
# the text fields sent alongside it.
# =============================================================================

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class MemberCreateForm(BaseModel):
    """Form fields sent with a new member's photo."""
    name: str = Field(..., min_length=1, max_length=120, description="Member name")
    birthdate: date = Field(..., description="ISO date, e.g. 2015-04-02")
    allowance: float = Field(..., ge=0, description="Allowance, can't be negative")


class MemberUpdateRequest(BaseModel):
    """
    Schema for updating a member. Omitted fields are left unchanged.

    Example:
        {"id": "...", "allowance": 12.5}
    """
    id: UUID = Field(..., description="Member to update")
    name: str | None = Field(default=None, min_length=1, max_length=120)
    birthdate: date | None = Field(default=None)
    allowance: float | None = Field(default=None, ge=0)

    def changes(self) -> dict[str, Any]:
        """Columns to write, serialized for the table client."""
        data = self.model_dump(exclude={"id"}, exclude_none=True)
        if "birthdate" in data:
            data["birthdate"] = data["birthdate"].isoformat()
        return data


class MemberResponse(BaseModel):
    """Member as returned by listings and updates."""
    id: UUID
    name: str
    photo: str | None = None
    birthdate: date
    allowance: float
