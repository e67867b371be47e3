"""List discussion use case."""

from pydantic import BaseModel

from discuss.application.usecase.common import CommentItem, ThreadItem, parse_user_id
from discuss.domain.service import CommentService, ModerationService, ThreadService
from discuss.domain.value import EntityKind, SortMode


class ListDiscussionRequest(BaseModel):
    """List discussion request."""

    entity_kind: EntityKind
    slug: str
    viewer_user_id: str | None = None  # None for anonymous viewers
    sort: SortMode | None = None
    limit: int | None = None
    offset: int = 0


class ListDiscussionResponse(BaseModel):
    """List discussion response."""

    thread: ThreadItem
    comments: list[CommentItem]
    can_moderate: bool
    sort: SortMode
    limit: int
    offset: int


class ListDiscussionUseCase:
    """Use case for reading the top-level comments of a story or profile."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize list discussion use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            moderation_service: Moderation domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.moderation_service = moderation_service

    async def execute(self, request: ListDiscussionRequest) -> ListDiscussionResponse:
        """Execute list discussion flow.

        Steps:
        1. Resolve the entity (fails if discussions are off)
        2. Get or create its thread
        3. List top-level comments; moderators also see hidden ones

        Args:
            request: List discussion request

        Returns:
            The thread and one page of top-level comments
        """
        entity = await self.thread_service.resolve_entity(
            request.entity_kind, request.slug
        )
        thread = await self.thread_service.get_or_create_thread(
            entity.kind, entity.entity_id
        )

        viewer = parse_user_id(request.viewer_user_id)
        can_moderate = await self.moderation_service.can_moderate(
            viewer, entity.owner_profile_slug
        )

        sort = request.sort or self.comment_service.settings.default_sort
        limit, offset = self.comment_service.normalize_page(
            request.limit, request.offset
        )
        comments = await self.comment_service.list_comments(
            thread_id=thread.id,
            viewer_user_id=viewer,
            include_hidden=can_moderate,
            sort=sort,
            limit=limit,
            offset=offset,
        )

        return ListDiscussionResponse(
            thread=ThreadItem.from_thread(thread),
            comments=[CommentItem.from_comment(c) for c in comments],
            can_moderate=can_moderate,
            sort=sort,
            limit=limit,
            offset=offset,
        )
