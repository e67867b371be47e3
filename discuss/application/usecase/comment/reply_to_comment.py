"""Reply to comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.common import CommentItem
from discuss.domain.service import CommentService, ThreadService
from discuss.domain.value import CommentId, EntityKey, EntityKind, UserId


class ReplyToCommentRequest(BaseModel):
    """Reply to comment request.

    entity_kind and slug are optional; when given, the parent must belong
    to that entity's discussion.
    """

    parent_id: str  # UUID string
    author_user_id: str  # User ID from authenticated user
    content: str
    entity_kind: EntityKind | None = None
    slug: str | None = None


class ReplyToCommentResponse(BaseModel):
    """Reply to comment response."""

    comment: CommentItem


class ReplyToCommentUseCase:
    """Use case for replying to an existing comment."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
    ) -> None:
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: ReplyToCommentRequest) -> ReplyToCommentResponse:
        """Execute reply flow.

        Raises:
            CommentNotFoundError: If the parent is missing, deleted, or
                belongs to another entity
            DiscussionsNotEnabledError: If discussions are off for the owner
            ThreadLockedError: If the thread is locked
            MaxNestingDepthError: If the reply would be too deep
        """
        parent_id = CommentId(UUID(request.parent_id))

        entity: EntityKey | None = None
        if request.entity_kind is not None and request.slug is not None:
            ref = await self.thread_service.resolve_entity(
                request.entity_kind, request.slug
            )
            entity = ref.key
        else:
            parent = await self.comment_service.get_comment_node(parent_id)
            thread = await self.thread_service.get_thread(parent.thread_id)
            await self.thread_service.ensure_enabled(thread)

        comment = await self.comment_service.create_comment(
            author_user_id=UserId(UUID(request.author_user_id)),
            content=request.content,
            entity=entity,
            parent_id=parent_id,
        )
        return ReplyToCommentResponse(comment=CommentItem.from_comment(comment))
