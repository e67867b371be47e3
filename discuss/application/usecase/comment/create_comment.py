"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.common import CommentItem
from discuss.domain.service import CommentService, ThreadService
from discuss.domain.value import EntityKind, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    entity_kind: EntityKind
    slug: str
    author_user_id: str  # User ID from authenticated user
    content: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for posting a top-level comment on a story or profile."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the entity (fails if discussions are off)
        2. Create the comment; the thread is created on first comment

        Args:
            request: Create comment request

        Returns:
            The created comment
        """
        entity = await self.thread_service.resolve_entity(
            request.entity_kind, request.slug
        )
        comment = await self.comment_service.create_comment(
            author_user_id=UserId(UUID(request.author_user_id)),
            content=request.content,
            entity=entity.key,
        )
        return CreateCommentResponse(comment=CommentItem.from_comment(comment))
