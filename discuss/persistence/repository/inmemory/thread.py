"""In-memory thread repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from discuss.domain.model.thread import Thread
from discuss.domain.repository.thread import ThreadRepository
from discuss.domain.value import EntityId, EntityKind, ThreadId

from .store import InMemoryDiscussionStore


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryDiscussionStore) -> None:
        self.store = store

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self.store.threads.get(thread_id)

    async def find_by_entity(
        self, entity_kind: EntityKind, entity_id: EntityId
    ) -> Optional[Thread]:
        """Find the thread anchored to an entity."""
        for thread in self.store.threads.values():
            if thread.entity_kind == entity_kind and thread.entity_id == entity_id:
                return thread
        return None

    async def insert(self, thread: Thread) -> Thread:
        """Insert a new thread.

        Raises:
            IntegrityError: If the entity already has a thread
        """
        async with self.store.lock:
            if await self.find_by_entity(thread.entity_kind, thread.entity_id):
                raise IntegrityError("Duplicate thread", None, Exception())
            self.store.threads[thread.id] = thread
            return thread

    async def set_locked(
        self, thread_id: ThreadId, is_locked: bool
    ) -> Optional[Thread]:
        """Set the lock flag of a thread."""
        async with self.store.lock:
            thread = self.store.threads.get(thread_id)
            if thread is None:
                return None
            updated = thread.model_copy(
                update={"is_locked": is_locked, "updated_at": datetime.now()}
            )
            self.store.threads[thread_id] = updated
            return updated

    async def adjust_comment_count(self, thread_id: ThreadId, delta: int) -> None:
        """Add delta to the comment count (floor 0)."""
        async with self.store.lock:
            thread = self.store.threads.get(thread_id)
            if thread is None:
                return
            self.store.threads[thread_id] = thread.model_copy(
                update={"comment_count": max(thread.comment_count + delta, 0)}
            )
