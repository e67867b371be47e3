"""Edit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.common import CommentItem
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    content: str


class EditCommentResponse(BaseModel):
    """Edit comment response."""

    comment: CommentItem


class EditCommentUseCase:
    """Use case for editing the content of one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Raises:
            CommentNotFoundError: If the comment is missing or deleted
            InsufficientPermissionError: If the user is not the author
        """
        comment = await self.comment_service.edit_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            acting_user_id=UserId(UUID(request.user_id)),
            content=request.content,
        )
        return EditCommentResponse(comment=CommentItem.from_comment(comment))
