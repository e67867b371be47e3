"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    profile_slug: str | None = None  # Profile a moderator acts for


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment.

    Authors delete their own comments; moderators of the owning profile
    may delete anyone's.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow."""
        comment = await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            acting_user_id=UserId(UUID(request.user_id)),
            profile_slug=request.profile_slug,
        )
        return DeleteCommentResponse(
            comment_id=str(comment.id), deleted=comment.is_deleted
        )
