"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import case, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentQuery, CommentRepository
from discuss.domain.value import CommentId, SortMode
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table

_c = comments_table.c

# Every ordering ends with the id so equal keys page deterministically
ORDERINGS: dict[SortMode, tuple[Any, ...]] = {
    SortMode.HOT: (
        _c.is_pinned.desc(),
        # Pinned comments keep creation order among themselves
        case((_c.is_pinned, 0), else_=_c.score).desc(),
        _c.created_at.asc(),
        _c.id.asc(),
    ),
    SortMode.TOP: (_c.score.desc(), _c.created_at.asc(), _c.id.asc()),
    SortMode.NEW: (_c.created_at.desc(), _c.id.desc()),
    SortMode.OLDEST: (_c.created_at.asc(), _c.id.asc()),
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones."""
        stmt = select(comments_table).where(_c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def _update_returning(self, stmt: Any) -> Optional[Comment]:
        result = await self.session.execute(stmt.returning(comments_table))
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a live comment."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .where(_c.deleted_at.is_(None))
            .values(content=content, edited_at=edited_at)
        )
        return await self._update_returning(stmt)

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a live comment as deleted."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .where(_c.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
        )
        return await self._update_returning(stmt)

    async def set_hidden(
        self, comment_id: CommentId, is_hidden: bool
    ) -> Optional[Comment]:
        """Set the hidden flag of a comment."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .values(is_hidden=is_hidden)
        )
        return await self._update_returning(stmt)

    async def set_pinned(
        self, comment_id: CommentId, is_pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of a comment."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .values(is_pinned=is_pinned)
        )
        return await self._update_returning(stmt)

    async def adjust_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add delta to the reply count of a live comment (floor 0)."""
        stmt = (
            update(comments_table)
            .where(_c.id == comment_id)
            .where(_c.deleted_at.is_(None))
            .values(reply_count=func.greatest(_c.reply_count + delta, 0))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def list_comments(self, query: CommentQuery) -> List[Comment]:
        """List one level of a thread's comment tree."""
        stmt = select(comments_table).where(_c.thread_id == query.thread_id)

        if query.parent_id is None:
            stmt = stmt.where(_c.parent_id.is_(None))
        else:
            stmt = stmt.where(_c.parent_id == query.parent_id)

        # Deleted comments stay only as tombstones for their live replies
        stmt = stmt.where(or_(_c.deleted_at.is_(None), _c.reply_count > 0))

        if not query.include_hidden:
            stmt = stmt.where(_c.is_hidden.is_(False))

        stmt = (
            stmt.order_by(*ORDERINGS[query.sort])
            .limit(query.limit)
            .offset(query.offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]
