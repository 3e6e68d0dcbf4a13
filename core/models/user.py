# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for account operations:
# - SignUpRequest: Input for creating an account (strength-checked password)
# - LoginRequest: Input for exchanging credentials for a token
#
# Passwords are only ever stored as bcrypt hashes; no response model
# carries the password column.
# =============================================================================

from typing import Annotated

from pydantic import AfterValidator, BaseModel, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from lib.security import is_strong_password

# Emails are matched case-insensitively; both sign-up and login lower-case them
NormalizedEmail = Annotated[EmailStr, AfterValidator(str.lower)]


class SignUpRequest(BaseModel):
    """
    Schema for creating a new account.

    Example:
        {
            "email": "parent@example.com",
            "password": "Secret123"
        }
    """

    email: NormalizedEmail = Field(
        ...,
        description="Account email, unique across users"
    )

    password: str = Field(
        ...,
        description="At least 8 characters with lowercase, uppercase and a digit"
    )

    @field_validator("password")
    @classmethod
    def password_is_strong(cls, value: str) -> str:
        if not is_strong_password(value):
            raise PydanticCustomError(
                "weak_password",
                "Invalid password: use at least 8 characters with lowercase, uppercase and a digit",
            )
        return value


class LoginRequest(BaseModel):
    """
    Schema for logging in.

    The password is not strength-checked here; it is compared against
    the stored hash.
    """

    email: NormalizedEmail = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Account password")
