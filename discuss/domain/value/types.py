"""Domain value objects for discussions.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject, ValueObject
from discuss.domain.value.identifiers import EntityId


class EntityKind(str, Enum):
    """Kind of entity a discussion thread is attached to."""

    STORY = "story"
    PROFILE = "profile"


class VoteDirection(IntEnum):
    """Direction of a vote on a comment."""

    UP = 1
    DOWN = -1


class SortMode(str, Enum):
    """Ordering applied when listing comments.

    HOT is the default: pinned comments first, then by score.
    """

    HOT = "hot"
    TOP = "top"
    NEW = "new"
    OLDEST = "oldest"


class MembershipTier(IntEnum):
    """Ordered membership standing on a profile.

    Higher values mean more privileges. Values are compared with >=,
    the names themselves carry no meaning inside the discussion engine.
    """

    FOLLOWER = 1
    SPONSOR = 2
    CONTRIBUTOR = 3
    MAINTAINER = 4
    LEAD = 5
    OWNER = 6


class Slug(RootValueObject[str]):
    """URL-safe slug of a story or profile.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'hello-world', 'open-source-turkey'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v


class EntityKey(ValueObject):
    """Identity of the entity a thread is anchored to."""

    kind: EntityKind
    entity_id: EntityId


class EntityRef(ValueObject):
    """A resolved story or profile.

    Produced by the entity resolver from a slug. The owner profile is the
    profile whose membership governs moderation of the entity's thread.
    """

    kind: EntityKind
    entity_id: EntityId
    slug: str
    owner_profile_slug: str

    @property
    def key(self) -> EntityKey:
        """Thread key for this entity."""
        return EntityKey(kind=self.kind, entity_id=self.entity_id)
