"""Test configuration and helpers."""

from uuid import uuid4

from discuss.adapter.profiles import InMemoryProfileDirectory
from discuss.domain.value import EntityKey, EntityKind, MembershipTier, UserId


def new_user_id() -> UserId:
    """Generate a fresh user ID."""
    return UserId(uuid4())


def seed_story(
    directory: InMemoryProfileDirectory,
    story_slug: str = "hello-world",
    profile_slug: str = "open-science",
    discussions_enabled: bool = True,
) -> EntityKey:
    """Register a profile and one of its stories.

    Returns:
        Thread key of the story
    """
    if profile_slug not in directory.profiles:
        directory.add_profile(profile_slug, discussions_enabled=discussions_enabled)
    story_id = directory.add_story(story_slug, profile_slug)
    return EntityKey(kind=EntityKind.STORY, entity_id=story_id)


def seed_moderator(
    directory: InMemoryProfileDirectory,
    profile_slug: str = "open-science",
    tier: MembershipTier = MembershipTier.CONTRIBUTOR,
) -> UserId:
    """Create a user holding a membership tier on a profile."""
    user_id = new_user_id()
    directory.grant(user_id, profile_slug, tier)
    return user_id
