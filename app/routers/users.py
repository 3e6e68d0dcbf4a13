# =============================================================================
# app/routers/users.py - Account Endpoints
# =============================================================================
# Sign-up, login and token validation.
# Sign-up and login are public; token validation requires a bearer token.
# =============================================================================

import logging

from fastapi.responses import JSONResponse
from starlette import status

from app.auth import CurrentUser, create_access_token
from app.context import ContextDep
from app.responses import ApiResponse, RouteResponse
from app.routing import Endpoints, PROTECTED_RESPONSES, VALIDATED_RESPONSES, Route, build_router, json_body
from app.validators import LoginData, SignUpData
from core.models import LoginRequest, SignUpRequest
from core.repositories import UserRepository

logger = logging.getLogger(__name__)


# =============================================================================
# Handlers
# =============================================================================

async def sign_up(data: SignUpData, ctx: ContextDep) -> JSONResponse:
    """
    Create an account.

    The email must not be registered yet and the password must have at
    least 8 characters with lowercase, uppercase and a digit.
    """
    UserRepository(ctx.db).insert({"email": data.email, "password": data.password_hash})
    return RouteResponse.created()


async def login(data: LoginData, ctx: ContextDep) -> JSONResponse:
    """
    Exchange credentials for a bearer token.

    The token is valid for one day and must be sent as
    `Authorization: Bearer <token>` on protected routes.
    """
    token = create_access_token(data.user["id"], ctx.settings)
    logger.info(f"User logged in: {data.user['id']}")
    return RouteResponse.success(token)


async def validate_token(user: CurrentUser) -> JSONResponse:
    """Check that the bearer token is still valid."""
    return RouteResponse.success_empty()


# =============================================================================
# Route Table
# =============================================================================

ROUTES = [
    Route(
        "POST", "", sign_up,
        status_code=status.HTTP_201_CREATED,
        summary="Create a user",
        response_model=ApiResponse[None],
        responses=VALIDATED_RESPONSES,
        openapi_extra=json_body(SignUpRequest),
    ),
    Route(
        "POST", "/login", login,
        summary="Log in",
        response_model=ApiResponse[str],
        responses=VALIDATED_RESPONSES,
        openapi_extra=json_body(LoginRequest),
    ),
    Route(
        "GET", "/login/validate", validate_token,
        summary="Validate the user's token",
        response_model=ApiResponse[None],
        responses=PROTECTED_RESPONSES,
    ),
]

router = build_router(ROUTES, prefix=Endpoints.USER_V1.value, tags=["Users"])
