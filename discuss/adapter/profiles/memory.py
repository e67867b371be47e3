"""In-memory profile directory for testing and local development."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from uuid import uuid4

from discuss.domain.service.ports import EntityResolver, PermissionOracle
from discuss.domain.value import (
    EntityId,
    EntityKind,
    EntityRef,
    MembershipTier,
    UserId,
)


@dataclass
class _Profile:
    id: EntityId
    slug: str
    discussions_enabled: bool


@dataclass
class _Story:
    id: EntityId
    slug: str
    profile_slug: str


@dataclass
class InMemoryProfileDirectory(EntityResolver, PermissionOracle):
    """Profiles, stories and memberships held in dictionaries."""

    profiles: Dict[str, _Profile] = field(default_factory=dict)
    stories: Dict[str, _Story] = field(default_factory=dict)
    memberships: Dict[Tuple[str, UserId], MembershipTier] = field(
        default_factory=dict
    )

    def add_profile(self, slug: str, discussions_enabled: bool = True) -> EntityId:
        """Register a profile and return its ID."""
        profile = _Profile(EntityId(uuid4()), slug, discussions_enabled)
        self.profiles[slug] = profile
        return profile.id

    def add_story(self, slug: str, profile_slug: str) -> EntityId:
        """Register a story authored by a profile and return its ID."""
        story = _Story(EntityId(uuid4()), slug, profile_slug)
        self.stories[slug] = story
        return story.id

    def set_discussions_enabled(self, profile_slug: str, enabled: bool) -> None:
        """Toggle the discussions feature flag of a profile."""
        self.profiles[profile_slug].discussions_enabled = enabled

    def grant(self, user_id: UserId, profile_slug: str, tier: MembershipTier) -> None:
        """Give a user a membership tier on a profile."""
        self.memberships[(profile_slug, user_id)] = tier

    async def resolve(self, kind: EntityKind, slug: str) -> Optional[EntityRef]:
        """Resolve a story or profile from its slug."""
        if kind == EntityKind.PROFILE:
            profile = self.profiles.get(slug)
            if profile is None:
                return None
            return EntityRef(
                kind=kind, entity_id=profile.id, slug=slug, owner_profile_slug=slug
            )

        story = self.stories.get(slug)
        if story is None or story.profile_slug not in self.profiles:
            return None
        return EntityRef(
            kind=kind,
            entity_id=story.id,
            slug=slug,
            owner_profile_slug=story.profile_slug,
        )

    async def owner_profile_slug(
        self, kind: EntityKind, entity_id: EntityId
    ) -> Optional[str]:
        """Find the slug of the profile that owns an entity."""
        if kind == EntityKind.PROFILE:
            for profile in self.profiles.values():
                if profile.id == entity_id:
                    return profile.slug
            return None

        for story in self.stories.values():
            if story.id == entity_id:
                return story.profile_slug
        return None

    async def is_discussions_enabled(self, profile_slug: str) -> bool:
        """Check the discussions feature flag of a profile."""
        profile = self.profiles.get(profile_slug)
        return profile is not None and profile.discussions_enabled

    async def has_access(
        self, user_id: UserId, profile_slug: str, minimum_tier: MembershipTier
    ) -> bool:
        """Check whether a user's membership on a profile reaches a tier."""
        tier = self.memberships.get((profile_slug, user_id))
        return tier is not None and tier >= minimum_tier
