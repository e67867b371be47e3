"""List replies use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.common import CommentItem, parse_user_id
from discuss.domain.service import CommentService, ModerationService, ThreadService
from discuss.domain.value import CommentId, SortMode


class ListRepliesRequest(BaseModel):
    """List replies request."""

    comment_id: str  # UUID string
    viewer_user_id: str | None = None
    sort: SortMode | None = None
    limit: int | None = None
    offset: int = 0


class ListRepliesResponse(BaseModel):
    """List replies response."""

    parent: CommentItem
    replies: list[CommentItem]
    can_moderate: bool


class ListRepliesUseCase:
    """Use case for reading the direct replies to a comment.

    Replies stay browsable under a deleted parent; the parent is then
    returned as a tombstone.
    """

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> None:
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.moderation_service = moderation_service

    async def execute(self, request: ListRepliesRequest) -> ListRepliesResponse:
        """Execute list replies flow.

        Raises:
            CommentNotFoundError: If the parent comment does not exist
            DiscussionsNotEnabledError: If discussions are off for the owner
        """
        parent = await self.comment_service.get_comment_node(
            CommentId(UUID(request.comment_id))
        )
        thread = await self.thread_service.get_thread(parent.thread_id)
        owner = await self.thread_service.ensure_enabled(thread)

        viewer = parse_user_id(request.viewer_user_id)
        can_moderate = await self.moderation_service.can_moderate(viewer, owner)

        replies = await self.comment_service.list_comments(
            thread_id=thread.id,
            parent_id=parent.id,
            viewer_user_id=viewer,
            include_hidden=can_moderate,
            sort=request.sort,
            limit=request.limit,
            offset=request.offset,
        )

        if parent.is_deleted:
            parent = parent.as_tombstone(
                self.comment_service.settings.deleted_content_marker
            )

        return ListRepliesResponse(
            parent=CommentItem.from_comment(parent),
            replies=[CommentItem.from_comment(c) for c in replies],
            can_moderate=can_moderate,
        )
