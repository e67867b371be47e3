"""Comment domain service."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire

from discuss.config import DiscussionSettings
from discuss.domain.error import (
    CommentNotFoundError,
    ContentTooLongError,
    ContentTooShortError,
    InsufficientPermissionError,
    MaxNestingDepthError,
    ThreadLockedError,
    ThreadNotFoundError,
)
from discuss.domain.model.comment import Comment
from discuss.domain.model.thread import Thread
from discuss.domain.repository import CommentQuery, CommentRepository, VoteRepository
from discuss.domain.value import CommentId, EntityKey, SortMode, ThreadId, UserId

from .base import Service, storage_errors
from .moderation_service import ModerationService
from .thread_service import ThreadService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        thread_service: ThreadService,
        moderation_service: ModerationService,
        discussion_settings: DiscussionSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            vote_repository: Vote repository (viewer vote lookups)
            thread_service: Thread domain service
            moderation_service: Moderation domain service
            discussion_settings: Discussion limits and policy
        """
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.thread_service = thread_service
        self.moderation_service = moderation_service
        self.settings = discussion_settings

    def validate_content(self, content: str) -> str:
        """Trim content and check its length in characters.

        Returns:
            The trimmed content

        Raises:
            ContentTooShortError: Below min_content_length
            ContentTooLongError: Above max_content_length
        """
        trimmed = content.strip()
        length = len(trimmed)
        if length < self.settings.min_content_length:
            raise ContentTooShortError(length, self.settings.min_content_length)
        if length > self.settings.max_content_length:
            raise ContentTooLongError(length, self.settings.max_content_length)
        return trimmed

    async def _find_live(self, comment_id: CommentId, operation: str) -> Comment:
        with storage_errors(operation):
            comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted:
            raise CommentNotFoundError(str(comment_id))
        return comment

    async def create_comment(
        self,
        author_user_id: UserId,
        content: str,
        entity: Optional[EntityKey] = None,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a top-level comment on an entity or a reply to a comment.

        Replies always land in their parent's thread. When both an entity
        and a parent are given, the parent must belong to that entity.

        Args:
            author_user_id: Author's user ID
            content: Comment content
            entity: Entity to comment on (top-level comments)
            parent_id: Parent comment ID (replies)

        Returns:
            Created comment

        Raises:
            ThreadNotFoundError: If neither entity nor parent is given
            ThreadLockedError: If the thread is locked
            CommentNotFoundError: If the parent is missing, deleted, or
                belongs to another entity
            MaxNestingDepthError: If the reply would be too deep
            ContentTooShortError: If content is too short
            ContentTooLongError: If content is too long
        """
        with logfire.span(
            "comment_service.create_comment",
            author_user_id=str(author_user_id),
            entity_kind=entity.kind.value if entity else None,
            entity_id=str(entity.entity_id) if entity else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            parent: Optional[Comment] = None
            thread: Thread

            if parent_id is not None:
                with storage_errors("create_comment"):
                    parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise CommentNotFoundError(str(parent_id))

                thread = await self.thread_service.get_thread(parent.thread_id)
                if entity is not None and thread.key != entity:
                    logfire.warn(
                        "Parent comment belongs to another entity",
                        parent_id=str(parent_id),
                        parent_thread_id=str(thread.id),
                    )
                    raise CommentNotFoundError(str(parent_id))
            elif entity is not None:
                thread = await self.thread_service.get_or_create_thread(
                    entity.kind, entity.entity_id
                )
            else:
                raise ThreadNotFoundError("no entity or parent given")

            if thread.is_locked:
                logfire.info("Comment rejected, thread locked", thread_id=str(thread.id))
                raise ThreadLockedError(str(thread.id))

            depth = 0
            if parent is not None:
                if parent.is_deleted:
                    logfire.warn("Reply to deleted comment", parent_id=str(parent.id))
                    raise CommentNotFoundError(str(parent.id))
                depth = parent.depth + 1
                if depth > self.settings.max_nesting_depth:
                    raise MaxNestingDepthError(depth, self.settings.max_nesting_depth)

            trimmed = self.validate_content(content)

            comment = Comment(
                id=CommentId(uuid4()),
                thread_id=thread.id,
                author_user_id=author_user_id,
                content=trimmed,
                parent_id=parent.id if parent else None,
                depth=depth,
                created_at=datetime.now(),
            )

            with storage_errors("create_comment"):
                created = await self.comment_repository.insert(comment)
                await self.thread_service.adjust_comment_count(thread.id, 1)
                if parent is not None:
                    await self.comment_repository.adjust_reply_count(parent.id, 1)

            logfire.info(
                "Comment created",
                comment_id=str(created.id),
                thread_id=str(thread.id),
                depth=depth,
            )
            return created

    async def edit_comment(
        self, comment_id: CommentId, acting_user_id: UserId, content: str
    ) -> Comment:
        """Edit the content of a comment.

        Only the author may edit. Depth, parent and votes are untouched.

        Raises:
            CommentNotFoundError: If the comment is missing or deleted
            InsufficientPermissionError: If the user is not the author
            ContentTooShortError: If content is too short
            ContentTooLongError: If content is too long
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            user_id=str(acting_user_id),
        ):
            comment = await self._find_live(comment_id, "edit_comment")
            if comment.author_user_id != acting_user_id:
                logfire.warn(
                    "Edit by non-author",
                    comment_id=str(comment_id),
                    user_id=str(acting_user_id),
                )
                raise InsufficientPermissionError(
                    "edit", str(comment_id), str(acting_user_id)
                )

            trimmed = self.validate_content(content)

            with storage_errors("edit_comment"):
                updated = await self.comment_repository.update_content(
                    comment_id, trimmed, datetime.now()
                )
            if updated is None:
                raise CommentNotFoundError(str(comment_id))
            return updated

    async def delete_comment(
        self,
        comment_id: CommentId,
        acting_user_id: UserId,
        profile_slug: Optional[str] = None,
    ) -> Comment:
        """Soft-delete a comment.

        Authors delete their own comments. Anyone else needs the moderator
        tier on profile_slug, which must own the comment's thread. Replies
        keep their parent link to the tombstone.

        Raises:
            CommentNotFoundError: If the comment is missing or already deleted
            InsufficientPermissionError: If the user is neither author nor moderator
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(acting_user_id),
        ):
            comment = await self._find_live(comment_id, "delete_comment")

            if comment.author_user_id != acting_user_id:
                if profile_slug is None or not (
                    await self.moderation_service.can_moderate(
                        acting_user_id, profile_slug
                    )
                ):
                    logfire.warn(
                        "Delete denied",
                        comment_id=str(comment_id),
                        user_id=str(acting_user_id),
                    )
                    raise InsufficientPermissionError(
                        "delete", str(comment_id), str(acting_user_id)
                    )
                thread = await self.thread_service.get_thread(comment.thread_id)
                await self.moderation_service.ensure_owned_by(
                    thread, profile_slug, "delete", str(comment_id), acting_user_id
                )

            with storage_errors("delete_comment"):
                deleted = await self.comment_repository.soft_delete(
                    comment_id, datetime.now()
                )
                if deleted is None:
                    raise CommentNotFoundError(str(comment_id))
                await self.thread_service.adjust_comment_count(comment.thread_id, -1)
                if comment.parent_id is not None:
                    await self.comment_repository.adjust_reply_count(
                        comment.parent_id, -1
                    )

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                by_author=comment.author_user_id == acting_user_id,
            )
            return deleted

    async def get_comment(
        self, comment_id: CommentId, locale: Optional[str] = None
    ) -> Comment:
        """Get a live comment by ID.

        Args:
            comment_id: Comment ID
            locale: Accepted for interface parity; comments are not localized

        Raises:
            CommentNotFoundError: If the comment is missing or deleted
        """
        return await self._find_live(comment_id, "get_comment")

    async def get_comment_node(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID even if it is a tombstone.

        Used to anchor reply listings, which stay browsable under deleted
        parents.

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with storage_errors("get_comment_node"):
            comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(str(comment_id))
        return comment

    def normalize_page(
        self, limit: Optional[int], offset: Optional[int]
    ) -> tuple[int, int]:
        """Apply default and maximum page size and clamp negative offsets."""
        if limit is None or limit <= 0:
            limit = self.settings.default_page_limit
        limit = min(limit, self.settings.max_page_limit)
        offset = max(offset or 0, 0)
        return limit, offset

    async def list_comments(
        self,
        thread_id: ThreadId,
        parent_id: Optional[CommentId] = None,
        viewer_user_id: Optional[UserId] = None,
        include_hidden: bool = False,
        sort: Optional[SortMode] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = 0,
    ) -> List[Comment]:
        """List top-level comments of a thread or direct replies to a comment.

        Deleted comments with live replies appear as tombstones whose content
        is replaced with the deleted marker; other deleted comments are left
        out. Hidden comments are left out unless include_hidden is set.

        Args:
            thread_id: Thread to list
            parent_id: Parent comment (None for top-level)
            viewer_user_id: Viewer whose vote directions are attached
            include_hidden: Whether hidden comments are returned
            sort: Ordering (defaults to the configured sort)
            limit: Page size (defaults to and is capped by configuration)
            offset: Number of comments to skip

        Returns:
            One page of comments

        Raises:
            ThreadNotFoundError: If the thread does not exist
        """
        limit, offset = self.normalize_page(limit, offset)
        sort = sort or self.settings.default_sort

        with logfire.span(
            "comment_service.list_comments",
            thread_id=str(thread_id),
            parent_id=str(parent_id) if parent_id else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            await self.thread_service.get_thread(thread_id)

            query = CommentQuery(
                thread_id=thread_id,
                parent_id=parent_id,
                include_hidden=include_hidden,
                sort=sort,
                limit=limit,
                offset=offset,
            )
            with storage_errors("list_comments"):
                comments = await self.comment_repository.list_comments(query)

                directions: dict[CommentId, int] = {}
                if viewer_user_id is not None and comments:
                    # One batch query for the whole page
                    directions = await self.vote_repository.find_directions(
                        viewer_user_id, [c.id for c in comments]
                    )

            marker = self.settings.deleted_content_marker
            result = []
            for comment in comments:
                if comment.is_deleted:
                    comment = comment.as_tombstone(marker)
                if comment.id in directions:
                    comment = comment.model_copy(
                        update={"viewer_vote_direction": directions[comment.id]}
                    )
                result.append(comment)
            return result
