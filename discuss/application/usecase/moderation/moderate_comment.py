"""Comment moderation use cases (hide and pin)."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.common import CommentItem
from discuss.domain.service import ModerationService
from discuss.domain.value import CommentId, UserId


class HideCommentRequest(BaseModel):
    """Hide comment request."""

    comment_id: str  # UUID string
    user_id: str  # Moderator's user ID
    profile_slug: str  # Profile the moderator acts for
    is_hidden: bool


class PinCommentRequest(BaseModel):
    """Pin comment request."""

    comment_id: str  # UUID string
    user_id: str  # Moderator's user ID
    profile_slug: str  # Profile the moderator acts for
    is_pinned: bool


class ModerateCommentResponse(BaseModel):
    """Moderated comment response."""

    comment: CommentItem


class HideCommentUseCase:
    """Use case for hiding or unhiding a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: HideCommentRequest) -> ModerateCommentResponse:
        """Execute hide flow."""
        comment = await self.moderation_service.hide_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            acting_user_id=UserId(UUID(request.user_id)),
            profile_slug=request.profile_slug,
            is_hidden=request.is_hidden,
        )
        return ModerateCommentResponse(comment=CommentItem.from_comment(comment))


class PinCommentUseCase:
    """Use case for pinning or unpinning a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: PinCommentRequest) -> ModerateCommentResponse:
        """Execute pin flow."""
        comment = await self.moderation_service.pin_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            acting_user_id=UserId(UUID(request.user_id)),
            profile_slug=request.profile_slug,
            is_pinned=request.is_pinned,
        )
        return ModerateCommentResponse(comment=CommentItem.from_comment(comment))
