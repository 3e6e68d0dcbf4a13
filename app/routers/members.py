# =============================================================================
# app/routers/members.py - Member CRUD Endpoints
# =============================================================================
# Members (household members with a photo and an allowance) belong to the
# authenticated user. Creation is multipart: name, birthdate, allowance and
# a single `photo` file field.
# =============================================================================

import logging

from fastapi.responses import JSONResponse
from starlette import status

from app.auth import CurrentUser
from app.context import ContextDep
from app.responses import ApiResponse, RouteResponse
from app.routing import Endpoints, PROTECTED_RESPONSES, Route, build_router, json_body
from app.validators import MemberCreateData, MemberDeleteData, MemberUpdateData
from core.models import MemberResponse, MemberUpdateRequest
from core.repositories import MemberRepository

logger = logging.getLogger(__name__)


# =============================================================================
# Handlers
# =============================================================================

async def create_member(data: MemberCreateData, ctx: ContextDep) -> JSONResponse:
    """
    Create a member.

    The photo must be a PNG or JPEG within the configured size limit;
    the allowance can't be negative.
    """
    photo = ctx.uploads.save(data.photo, data.photo_content_type)

    try:
        MemberRepository(ctx.db).insert({
            "name": data.name,
            "photo": photo,
            "birthdate": data.birthdate.isoformat(),
            "allowance": data.allowance,
            "parent_id": str(data.user.id),
        })
    except Exception:
        ctx.uploads.remove(photo)
        raise

    return RouteResponse.created()


async def list_members(user: CurrentUser, ctx: ContextDep) -> JSONResponse:
    """Return the user's members."""
    rows = MemberRepository(ctx.db).find_by_parent_id(user.id)
    return RouteResponse.success([MemberResponse(**row) for row in rows])


async def update_member(data: MemberUpdateData, ctx: ContextDep) -> JSONResponse:
    """Update name, birthdate or allowance of the member with the given id."""
    member = {**data.member, **data.changes}

    saved = MemberRepository(ctx.db).update(member)

    return RouteResponse.success(MemberResponse(**saved))


async def delete_member(data: MemberDeleteData, ctx: ContextDep) -> JSONResponse:
    """Delete a member permanently, including the stored photo."""
    MemberRepository(ctx.db).delete(data.member["id"])
    ctx.uploads.remove(data.member.get("photo"))
    return RouteResponse.success_empty()


# =============================================================================
# Route Table
# =============================================================================

ROUTES = [
    Route(
        "POST", "", create_member,
        status_code=status.HTTP_201_CREATED,
        summary="Create a member",
        response_model=ApiResponse[None],
        responses=PROTECTED_RESPONSES,
    ),
    Route(
        "GET", "", list_members,
        summary="List the user's members",
        response_model=ApiResponse[list[MemberResponse]],
        responses=PROTECTED_RESPONSES,
    ),
    Route(
        "PUT", "", update_member,
        summary="Update the member with the given id",
        response_model=ApiResponse[MemberResponse],
        responses=PROTECTED_RESPONSES,
        openapi_extra=json_body(MemberUpdateRequest),
    ),
    Route(
        "DELETE", "/{member_id}", delete_member,
        summary="Delete a member permanently",
        response_model=ApiResponse[None],
        responses=PROTECTED_RESPONSES,
    ),
]

router = build_router(ROUTES, prefix=Endpoints.MEMBERS_V1.value, tags=["Members"])
