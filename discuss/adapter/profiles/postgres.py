"""Profile directory backed by the profiles subsystem's tables."""

from typing import Optional

import logfire
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.service.ports import EntityResolver, PermissionOracle
from discuss.domain.value import (
    EntityId,
    EntityKind,
    EntityRef,
    MembershipTier,
    UserId,
)
from discuss.persistence.tables import (
    profile_memberships_table,
    profiles_table,
    stories_table,
)

_profiles = profiles_table.c
_stories = stories_table.c
_memberships = profile_memberships_table.c


class PostgresProfileDirectory(EntityResolver, PermissionOracle):
    """Read-only view of profiles, stories and memberships."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize directory with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def resolve(self, kind: EntityKind, slug: str) -> Optional[EntityRef]:
        """Resolve a story or profile from its slug."""
        if kind == EntityKind.PROFILE:
            stmt = select(_profiles.id, _profiles.slug.label("owner_slug")).where(
                _profiles.slug == slug
            )
        else:
            stmt = (
                select(_stories.id, _profiles.slug.label("owner_slug"))
                .select_from(
                    stories_table.join(
                        profiles_table, _stories.author_profile_id == _profiles.id
                    )
                )
                .where(_stories.slug == slug)
            )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        return EntityRef(
            kind=kind,
            entity_id=EntityId(row.id),
            slug=slug,
            owner_profile_slug=row.owner_slug,
        )

    async def owner_profile_slug(
        self, kind: EntityKind, entity_id: EntityId
    ) -> Optional[str]:
        """Find the slug of the profile that owns an entity."""
        if kind == EntityKind.PROFILE:
            stmt = select(_profiles.slug).where(_profiles.id == entity_id)
        else:
            stmt = (
                select(_profiles.slug)
                .select_from(
                    stories_table.join(
                        profiles_table, _stories.author_profile_id == _profiles.id
                    )
                )
                .where(_stories.id == entity_id)
            )

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_discussions_enabled(self, profile_slug: str) -> bool:
        """Check the discussions feature flag of a profile."""
        stmt = select(_profiles.feature_discussions).where(
            _profiles.slug == profile_slug
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar_one_or_none())

    async def has_access(
        self, user_id: UserId, profile_slug: str, minimum_tier: MembershipTier
    ) -> bool:
        """Check whether a user's membership on a profile reaches a tier."""
        stmt = (
            select(_memberships.kind)
            .select_from(
                profile_memberships_table.join(
                    profiles_table, _memberships.profile_id == _profiles.id
                )
            )
            .where(
                and_(_profiles.slug == profile_slug, _memberships.user_id == user_id)
            )
        )
        result = await self.session.execute(stmt)
        kind = result.scalar_one_or_none()
        if kind is None:
            return False

        try:
            tier = MembershipTier[kind.upper()]
        except KeyError:
            logfire.warn(
                "Unknown membership kind", kind=kind, profile_slug=profile_slug
            )
            return False
        return tier >= minimum_tier
