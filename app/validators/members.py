# =============================================================================
# app/validators/members.py - Member Validators
# =============================================================================
# Every member endpoint requires a valid bearer token. Then, in order:
#
#   create: photo present -> photo type allowed -> photo within size limit
#   update: member exists -> member owned by caller
#   delete: member exists -> member owned by caller
#
# Name, birthdate and allowance (>= 0) are parsed against MemberCreateForm /
# MemberUpdateRequest first. Field errors and rule failures are reported
# together, e.g. a missing name and a missing photo in one response.
# =============================================================================

from dataclasses import dataclass
from datetime import date
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, File, Form, Path, UploadFile

from app.auth import AuthUser, CurrentUser
from app.context import ContextDep
from app.validators.common import JsonBody, OwnedRecordState, record_exists, record_owned_by_caller
from core.models import MemberCreateForm, MemberUpdateRequest
from core.repositories import MemberRepository
from core.validation import Rule, ValidationChain, parse_fields


# =============================================================================
# Validated Inputs
# =============================================================================

@dataclass(frozen=True)
class MemberCreateInput:
    user: AuthUser
    name: str
    birthdate: date
    allowance: float
    photo: bytes
    photo_content_type: str


@dataclass(frozen=True)
class MemberUpdateInput:
    user: AuthUser
    member: dict[str, Any]
    changes: dict[str, Any]


@dataclass(frozen=True)
class MemberDeleteInput:
    user: AuthUser
    member: dict[str, Any]


# =============================================================================
# Photo Rules
# =============================================================================

@dataclass
class PhotoState:
    upload: UploadFile | None
    allowed_types: list[str]
    max_bytes: int
    content: bytes = b""


async def photo_present(state: PhotoState) -> bool:
    if state.upload is None:
        return False
    # One byte past the limit is enough for photo_within_limit to reject it
    state.content = await state.upload.read(state.max_bytes + 1)
    return len(state.content) > 0


async def photo_type_allowed(state: PhotoState) -> bool:
    return (state.upload.content_type or "").lower() in state.allowed_types


async def photo_within_limit(state: PhotoState) -> bool:
    return len(state.content) <= state.max_bytes


MEMBER_NOT_FOUND = "Member not found"
MEMBER_NOT_OWNED = "Member does not belong to the user"

UPDATE_CHAIN = ValidationChain(
    Rule("id", record_exists, MEMBER_NOT_FOUND),
    Rule("parent_id", record_owned_by_caller, MEMBER_NOT_OWNED, requires=("id",)),
)

DELETE_CHAIN = UPDATE_CHAIN


def photo_chain(allowed_types: list[str], max_mb: int) -> ValidationChain:
    """Photo rules; messages name the configured limits."""
    return ValidationChain(
        Rule("photo", photo_present, "Photo is required"),
        Rule(
            "photo",
            photo_type_allowed,
            f"Photo must be one of: {', '.join(allowed_types)}",
            requires=("photo",),
        ),
        Rule(
            "photo",
            photo_within_limit,
            f"Photo must be smaller than {max_mb}MB",
            requires=("photo",),
        ),
    )


# =============================================================================
# Dependencies
# =============================================================================

async def validate_member_create(
    user: CurrentUser,
    ctx: ContextDep,
    name: Annotated[str | None, Form(description="1 to 120 characters")] = None,
    birthdate: Annotated[str | None, Form(description="ISO date, e.g. 2015-04-02")] = None,
    allowance: Annotated[str | None, Form(description="Number, can't be negative")] = None,
    photo: Annotated[UploadFile | None, File(description="PNG or JPEG photo")] = None,
) -> MemberCreateInput:
    fields = {"name": name, "birthdate": birthdate, "allowance": allowance}
    values, errors = parse_fields(
        MemberCreateForm, {key: value for key, value in fields.items() if value is not None}
    )

    settings = ctx.settings
    state = PhotoState(
        upload=photo,
        allowed_types=settings.allowed_image_types_list,
        max_bytes=settings.max_upload_size_bytes,
    )
    await photo_chain(settings.allowed_image_types_list, settings.MAX_UPLOAD_SIZE_MB).run(state, errors)

    return MemberCreateInput(
        user=user,
        name=values["name"],
        birthdate=values["birthdate"],
        allowance=values["allowance"],
        photo=state.content,
        photo_content_type=photo.content_type,
    )


async def validate_member_update(
    user: CurrentUser,
    ctx: ContextDep,
    body: JsonBody = None,
) -> MemberUpdateInput:
    values, errors = parse_fields(MemberUpdateRequest, body)
    state = OwnedRecordState(repository=MemberRepository(ctx.db), user=user, record_id=values.get("id"))
    await UPDATE_CHAIN.run(state, errors)

    changes = MemberUpdateRequest.model_validate(values).changes()
    return MemberUpdateInput(user=user, member=state.record, changes=changes)


async def validate_member_delete(
    member_id: Annotated[UUID, Path(description="Member UUID")],
    user: CurrentUser,
    ctx: ContextDep,
) -> MemberDeleteInput:
    state = OwnedRecordState(repository=MemberRepository(ctx.db), user=user, record_id=member_id)
    await DELETE_CHAIN.run(state)
    return MemberDeleteInput(user=user, member=state.record)


MemberCreateData = Annotated[MemberCreateInput, Depends(validate_member_create)]
MemberUpdateData = Annotated[MemberUpdateInput, Depends(validate_member_update)]
MemberDeleteData = Annotated[MemberDeleteInput, Depends(validate_member_delete)]
