# =============================================================================
# app/validators/users.py - Account Validators
# =============================================================================
# Validation for sign-up and login. Email format and password strength are
# declared on the request models; the chains below check the users table.
# Model errors and table checks are reported together in one response.
# =============================================================================

from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from app.context import ContextDep
from app.validators.common import JsonBody
from core.models import LoginRequest, SignUpRequest
from core.repositories import UserRepository
from core.validation import Rule, ValidationChain, parse_fields
from lib.security import hash_password, verify_password


# =============================================================================
# Validated Inputs
# =============================================================================

@dataclass(frozen=True)
class SignUpInput:
    email: str
    password_hash: str


@dataclass(frozen=True)
class LoginInput:
    user: dict[str, Any]


# =============================================================================
# Rules
# =============================================================================

@dataclass
class AccountState:
    users: UserRepository
    passwords: CryptContext
    email: str | None
    password: str | None
    user: dict[str, Any] | None = None


async def email_available(state: AccountState) -> bool:
    return state.users.find_by_email(state.email) is None


async def email_registered(state: AccountState) -> bool:
    state.user = state.users.find_by_email(state.email)
    return state.user is not None


async def password_matches(state: AccountState) -> bool:
    # bcrypt blocks; run it in a worker thread
    return await run_in_threadpool(
        verify_password, state.passwords, state.password, state.user.get("password")
    )


SIGN_UP_CHAIN = ValidationChain(
    Rule("email", email_available, "Email already registered"),
)

LOGIN_CHAIN = ValidationChain(
    Rule("email", email_registered, "Email not registered"),
    Rule("password", password_matches, "Incorrect password", requires=("email",)),
)


# =============================================================================
# Dependencies
# =============================================================================

async def validate_sign_up(ctx: ContextDep, body: JsonBody = None) -> SignUpInput:
    """Email must be unused; returns the email with the hashed password."""
    values, errors = parse_fields(SignUpRequest, body)
    state = AccountState(
        users=UserRepository(ctx.db),
        passwords=ctx.passwords,
        email=values.get("email"),
        password=values.get("password"),
    )
    await SIGN_UP_CHAIN.run(state, errors)

    password_hash = await run_in_threadpool(hash_password, ctx.passwords, state.password)
    return SignUpInput(email=state.email, password_hash=password_hash)


async def validate_login(ctx: ContextDep, body: JsonBody = None) -> LoginInput:
    """Email must be registered and the password must match its hash."""
    values, errors = parse_fields(LoginRequest, body)
    state = AccountState(
        users=UserRepository(ctx.db),
        passwords=ctx.passwords,
        email=values.get("email"),
        password=values.get("password"),
    )
    await LOGIN_CHAIN.run(state, errors)
    return LoginInput(user=state.user)


SignUpData = Annotated[SignUpInput, Depends(validate_sign_up)]
LoginData = Annotated[LoginInput, Depends(validate_login)]
