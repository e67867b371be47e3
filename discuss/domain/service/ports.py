"""Interfaces of the collaborators the discussion engine consumes.

Entity resolution, the discussions feature flag and profile membership are
owned by the profiles subsystem. Implementations live in the adapter layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.value import (
    EntityId,
    EntityKind,
    EntityRef,
    MembershipTier,
    UserId,
)


class EntityResolver(ABC):
    """Resolves stories and profiles that discussions attach to."""

    @abstractmethod
    async def resolve(self, kind: EntityKind, slug: str) -> Optional[EntityRef]:
        """Resolve an entity from its slug.

        Args:
            kind: Story or profile
            slug: The entity's slug

        Returns:
            The resolved entity, None if no such entity exists
        """
        pass

    @abstractmethod
    async def owner_profile_slug(
        self, kind: EntityKind, entity_id: EntityId
    ) -> Optional[str]:
        """Find the slug of the profile that owns an entity.

        A profile owns itself; a story is owned by its author profile.

        Returns:
            The owner profile slug, None if the entity no longer exists
        """
        pass

    @abstractmethod
    async def is_discussions_enabled(self, profile_slug: str) -> bool:
        """Check the discussions feature flag of a profile."""
        pass


class PermissionOracle(ABC):
    """Answers membership questions about profiles."""

    @abstractmethod
    async def has_access(
        self, user_id: UserId, profile_slug: str, minimum_tier: MembershipTier
    ) -> bool:
        """Check whether a user holds at least a membership tier on a profile.

        Args:
            user_id: The user's ID
            profile_slug: The profile's slug
            minimum_tier: Lowest tier that grants access

        Returns:
            True if the user's tier is minimum_tier or higher
        """
        pass
