"""Moderation routes.

Every action takes an explicit target state, so repeating a request is
harmless.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from discuss.application.usecase.moderation import (
    HideCommentRequest,
    HideCommentUseCase,
    LockThreadRequest,
    LockThreadResponse,
    LockThreadUseCase,
    ModerateCommentResponse,
    PinCommentRequest,
    PinCommentUseCase,
)
from discuss.domain.service import JWTService
from discuss.interface.api.auth import require_user_id

router = APIRouter(prefix="/discussions", tags=["moderation"], route_class=DishkaRoute)


class HideAPIRequest(BaseModel):
    """API request for hiding a comment."""

    profile_slug: str
    is_hidden: bool


class PinAPIRequest(BaseModel):
    """API request for pinning a comment."""

    profile_slug: str
    is_pinned: bool


class LockAPIRequest(BaseModel):
    """API request for locking a thread."""

    profile_slug: str
    is_locked: bool


@router.put("/comments/{comment_id}/hide", response_model=ModerateCommentResponse)
async def hide_comment(
    comment_id: UUID,
    request: HideAPIRequest,
    use_case: FromDishka[HideCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerateCommentResponse:
    """Hide or unhide a comment."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        HideCommentRequest(
            comment_id=str(comment_id),
            user_id=user_id,
            profile_slug=request.profile_slug,
            is_hidden=request.is_hidden,
        )
    )


@router.put("/comments/{comment_id}/pin", response_model=ModerateCommentResponse)
async def pin_comment(
    comment_id: UUID,
    request: PinAPIRequest,
    use_case: FromDishka[PinCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerateCommentResponse:
    """Pin or unpin a comment."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        PinCommentRequest(
            comment_id=str(comment_id),
            user_id=user_id,
            profile_slug=request.profile_slug,
            is_pinned=request.is_pinned,
        )
    )


@router.put("/threads/{thread_id}/lock", response_model=LockThreadResponse)
async def lock_thread(
    thread_id: UUID,
    request: LockAPIRequest,
    use_case: FromDishka[LockThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LockThreadResponse:
    """Lock or unlock a thread."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        LockThreadRequest(
            thread_id=str(thread_id),
            user_id=user_id,
            profile_slug=request.profile_slug,
            is_locked=request.is_locked,
        )
    )
