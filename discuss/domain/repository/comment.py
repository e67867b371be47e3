"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, SortMode, ThreadId


class CommentQuery(BaseModel):
    """Filter, ordering and page of a comment listing.

    parent_id None selects top-level comments, otherwise the direct
    children of that comment. limit and offset are expected to be
    normalized by the caller.
    """

    thread_id: ThreadId
    parent_id: Optional[CommentId] = None
    include_hidden: bool = False
    sort: SortMode = SortMode.HOT
    limit: int = Field(default=25, gt=0)
    offset: int = Field(default=0, ge=0)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The inserted comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a live comment and stamp edited_at.

        Args:
            comment_id: The comment ID
            content: New content
            edited_at: Edit timestamp

        Returns:
            The updated comment, None if missing or deleted
        """
        pass

    @abstractmethod
    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a live comment as deleted.

        The row, its id and its parent link are kept.

        Args:
            comment_id: The comment ID
            deleted_at: Deletion timestamp

        Returns:
            The deleted comment, None if missing or already deleted
        """
        pass

    @abstractmethod
    async def set_hidden(
        self, comment_id: CommentId, is_hidden: bool
    ) -> Optional[Comment]:
        """Set the hidden flag of a comment.

        Returns:
            The updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def set_pinned(
        self, comment_id: CommentId, is_pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of a comment.

        Returns:
            The updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def adjust_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add delta to the comment's reply count (floor 0).

        Deleted comments keep their count frozen, so a tombstone stays in
        listings for as long as anything below it is reachable.

        Args:
            comment_id: The comment ID
            delta: Amount to add (negative to decrement)
        """
        pass

    @abstractmethod
    async def list_comments(self, query: CommentQuery) -> List[Comment]:
        """List one level of a thread's comment tree.

        Deleted comments are included only while they still have live
        replies; callers are responsible for masking their content.
        Ordering always ends with the comment id so pages are stable.

        Args:
            query: Filter, ordering and page

        Returns:
            List of comments in the requested order
        """
        pass
