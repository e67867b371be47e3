"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Any, Callable, List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentQuery, CommentRepository
from discuss.domain.value import CommentId, SortMode

from .store import InMemoryDiscussionStore


def _hot_key(c: Comment) -> tuple[Any, ...]:
    return (not c.is_pinned, 0 if c.is_pinned else -c.score, c.created_at, c.id)


def _top_key(c: Comment) -> tuple[Any, ...]:
    return (-c.score, c.created_at, c.id)


def _oldest_key(c: Comment) -> tuple[Any, ...]:
    return (c.created_at, c.id)


# (key, reverse) pairs mirroring the SQL orderings
SORT_KEYS: dict[SortMode, tuple[Callable[[Comment], tuple[Any, ...]], bool]] = {
    SortMode.HOT: (_hot_key, False),
    SortMode.TOP: (_top_key, False),
    SortMode.NEW: (_oldest_key, True),
    SortMode.OLDEST: (_oldest_key, False),
}


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryDiscussionStore) -> None:
        self.store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones."""
        return self.store.comments.get(comment_id)

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self.store.comments[comment.id] = comment
        return comment

    async def _update(self, comment_id: CommentId, **changes: Any) -> Optional[Comment]:
        async with self.store.lock:
            comment = self.store.comments.get(comment_id)
            if comment is None:
                return None
            updated = comment.model_copy(update=changes)
            self.store.comments[comment_id] = updated
            return updated

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a live comment."""
        comment = self.store.comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        return await self._update(comment_id, content=content, edited_at=edited_at)

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a live comment as deleted."""
        comment = self.store.comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        return await self._update(comment_id, deleted_at=deleted_at)

    async def set_hidden(
        self, comment_id: CommentId, is_hidden: bool
    ) -> Optional[Comment]:
        """Set the hidden flag of a comment."""
        return await self._update(comment_id, is_hidden=is_hidden)

    async def set_pinned(
        self, comment_id: CommentId, is_pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of a comment."""
        return await self._update(comment_id, is_pinned=is_pinned)

    async def adjust_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Add delta to the reply count of a live comment (floor 0)."""
        async with self.store.lock:
            comment = self.store.comments.get(comment_id)
            if comment is None or comment.is_deleted:
                return
            self.store.comments[comment_id] = comment.model_copy(
                update={"reply_count": max(comment.reply_count + delta, 0)}
            )

    async def list_comments(self, query: CommentQuery) -> List[Comment]:
        """List one level of a thread's comment tree."""
        candidates = [
            c
            for c in self.store.comments.values()
            if c.thread_id == query.thread_id
            and c.parent_id == query.parent_id
            and (not c.is_deleted or c.reply_count > 0)
            and (query.include_hidden or not c.is_hidden)
        ]

        key, reverse = SORT_KEYS[query.sort]
        candidates.sort(key=key, reverse=reverse)
        return candidates[query.offset : query.offset + query.limit]
