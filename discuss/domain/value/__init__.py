"""Domain value objects for discussions."""

from discuss.domain.value.identifiers import (
    CommentId,
    EntityId,
    ThreadId,
    UserId,
    VoteId,
)
from discuss.domain.value.types import (
    EntityKey,
    EntityKind,
    EntityRef,
    MembershipTier,
    Slug,
    SortMode,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "ThreadId",
    "CommentId",
    "VoteId",
    "UserId",
    "EntityId",
    # Types
    "EntityKind",
    "EntityKey",
    "EntityRef",
    "MembershipTier",
    "Slug",
    "SortMode",
    "VoteDirection",
]
