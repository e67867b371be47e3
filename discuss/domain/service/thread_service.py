"""Thread domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from discuss.domain.error import (
    DiscussionsNotEnabledError,
    InternalFailureError,
    ThreadNotFoundError,
)
from discuss.domain.model.thread import Thread
from discuss.domain.repository import ThreadRepository
from discuss.domain.value import EntityId, EntityKind, EntityRef, Slug, ThreadId

from .base import Service, storage_errors
from .ports import EntityResolver


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        entity_resolver: EntityResolver,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            entity_resolver: Resolver for stories and profiles
        """
        self.thread_repository = thread_repository
        self.entity_resolver = entity_resolver

    async def resolve_entity(self, entity_kind: EntityKind, slug: str) -> EntityRef:
        """Resolve a story or profile whose discussions are enabled.

        Args:
            entity_kind: Story or profile
            slug: The entity's slug

        Returns:
            The resolved entity

        Raises:
            ThreadNotFoundError: If no entity has this slug (or it is malformed)
            DiscussionsNotEnabledError: If the owning profile has discussions off
        """
        with logfire.span(
            "thread_service.resolve_entity", entity_kind=entity_kind.value, slug=slug
        ):
            try:
                Slug(root=slug)
            except ValidationError:
                raise ThreadNotFoundError(f"{entity_kind.value}:{slug}")

            with storage_errors("resolve_entity"):
                entity = await self.entity_resolver.resolve(entity_kind, slug)
                if entity is None:
                    logfire.warn(
                        "Unknown discussion entity",
                        entity_kind=entity_kind.value,
                        slug=slug,
                    )
                    raise ThreadNotFoundError(f"{entity_kind.value}:{slug}")

                enabled = await self.entity_resolver.is_discussions_enabled(
                    entity.owner_profile_slug
                )

            if not enabled:
                logfire.info(
                    "Discussions not enabled",
                    entity_kind=entity_kind.value,
                    profile_slug=entity.owner_profile_slug,
                )
                raise DiscussionsNotEnabledError(entity.owner_profile_slug)

            return entity

    async def get_or_create_thread(
        self, entity_kind: EntityKind, entity_id: EntityId
    ) -> Thread:
        """Get the thread of an entity, creating it on first access.

        Concurrent first accesses race on the unique (entity_kind, entity_id)
        constraint; the loser re-fetches the winner's row.

        Args:
            entity_kind: Story or profile
            entity_id: The entity's identifier

        Returns:
            The entity's thread
        """
        with logfire.span(
            "thread_service.get_or_create_thread",
            entity_kind=entity_kind.value,
            entity_id=str(entity_id),
        ):
            with storage_errors("get_or_create_thread"):
                existing = await self.thread_repository.find_by_entity(
                    entity_kind, entity_id
                )
                if existing:
                    return existing

                thread = Thread(
                    id=ThreadId(uuid4()),
                    entity_kind=entity_kind,
                    entity_id=entity_id,
                    created_at=datetime.now(),
                )

                try:
                    created = await self.thread_repository.insert(thread)
                except IntegrityError:
                    logfire.info(
                        "Thread created concurrently, re-fetching",
                        entity_kind=entity_kind.value,
                        entity_id=str(entity_id),
                    )
                    winner = await self.thread_repository.find_by_entity(
                        entity_kind, entity_id
                    )
                    if winner is None:
                        raise InternalFailureError("get_or_create_thread")
                    return winner

                logfire.info(
                    "Thread created",
                    thread_id=str(created.id),
                    entity_kind=entity_kind.value,
                    entity_id=str(entity_id),
                )
                return created

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            ThreadNotFoundError: If the thread does not exist
        """
        with storage_errors("get_thread"):
            thread = await self.thread_repository.find_by_id(thread_id)
        if thread is None:
            raise ThreadNotFoundError(str(thread_id))
        return thread

    async def set_locked(self, thread_id: ThreadId, is_locked: bool) -> Thread:
        """Set the lock flag of a thread to an explicit value.

        Permission checks are the caller's responsibility.

        Raises:
            ThreadNotFoundError: If the thread does not exist
        """
        with logfire.span(
            "thread_service.set_locked", thread_id=str(thread_id), is_locked=is_locked
        ):
            with storage_errors("lock_thread"):
                thread = await self.thread_repository.set_locked(thread_id, is_locked)
            if thread is None:
                raise ThreadNotFoundError(str(thread_id))
            return thread

    async def adjust_comment_count(self, thread_id: ThreadId, delta: int) -> None:
        """Adjust the live comment count of a thread."""
        with storage_errors("adjust_comment_count"):
            await self.thread_repository.adjust_comment_count(thread_id, delta)

    async def ensure_enabled(self, thread: Thread) -> str:
        """Check that the thread's owning profile has discussions on.

        Returns:
            The owner profile slug

        Raises:
            ThreadNotFoundError: If the thread's entity no longer exists
            DiscussionsNotEnabledError: If discussions are off for the owner
        """
        owner = await self.owner_profile_slug(thread)
        if owner is None:
            raise ThreadNotFoundError(str(thread.id))

        with storage_errors("ensure_enabled"):
            enabled = await self.entity_resolver.is_discussions_enabled(owner)
        if not enabled:
            raise DiscussionsNotEnabledError(owner)
        return owner

    async def owner_profile_slug(self, thread: Thread) -> Optional[str]:
        """Slug of the profile that owns the thread's entity."""
        with storage_errors("owner_profile_slug"):
            return await self.entity_resolver.owner_profile_slug(
                thread.entity_kind, thread.entity_id
            )
