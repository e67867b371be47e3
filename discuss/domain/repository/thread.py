"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model.thread import Thread
from discuss.domain.value import EntityId, EntityKind, ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_entity(
        self, entity_kind: EntityKind, entity_id: EntityId
    ) -> Optional[Thread]:
        """Find the thread anchored to an entity.

        Args:
            entity_kind: Kind of the entity (story or profile)
            entity_id: The entity's identifier

        Returns:
            The thread if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, thread: Thread) -> Thread:
        """Insert a new thread.

        A failed insert must leave the surrounding transaction usable so the
        caller can re-fetch the winning row.

        Args:
            thread: The thread to insert

        Returns:
            The inserted thread

        Raises:
            IntegrityError: If a thread already exists for the entity
        """
        pass

    @abstractmethod
    async def set_locked(self, thread_id: ThreadId, is_locked: bool) -> Optional[Thread]:
        """Set the lock flag of a thread.

        Args:
            thread_id: The thread ID
            is_locked: Desired lock state

        Returns:
            The updated thread, None if it does not exist
        """
        pass

    @abstractmethod
    async def adjust_comment_count(self, thread_id: ThreadId, delta: int) -> None:
        """Atomically add delta to the thread's comment count (floor 0).

        Args:
            thread_id: The thread ID
            delta: Amount to add (negative to decrement)
        """
        pass
