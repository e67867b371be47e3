"""PostgreSQL implementation of Thread repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Thread
from discuss.domain.repository import ThreadRepository
from discuss.domain.value import EntityId, EntityKind, ThreadId
from discuss.persistence.mappers import row_to_thread, thread_to_dict
from discuss.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_entity(
        self, entity_kind: EntityKind, entity_id: EntityId
    ) -> Optional[Thread]:
        """Find the thread anchored to an entity."""
        stmt = select(threads_table).where(
            and_(
                threads_table.c.entity_kind == entity_kind.value,
                threads_table.c.entity_id == entity_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def insert(self, thread: Thread) -> Thread:
        """Insert a new thread inside a savepoint.

        A unique violation rolls back only the savepoint, so the request
        transaction can still re-fetch the existing thread.
        """
        stmt = (
            insert(threads_table)
            .values(**thread_to_dict(thread))
            .returning(threads_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_thread(row._asdict()) if row else thread

    async def set_locked(
        self, thread_id: ThreadId, is_locked: bool
    ) -> Optional[Thread]:
        """Set the lock flag of a thread."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(is_locked=is_locked, updated_at=datetime.now())
            .returning(threads_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_thread(row._asdict())

    async def adjust_comment_count(self, thread_id: ThreadId, delta: int) -> None:
        """Atomically add delta to the comment count (floor 0)."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(
                comment_count=func.greatest(threads_table.c.comment_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
