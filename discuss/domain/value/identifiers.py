"""Strongly typed identifiers for discussion entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Discussion entity identifiers
ThreadId = NewType("ThreadId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)

# Identifiers owned by other subsystems (users, stories, profiles)
UserId = NewType("UserId", UUID)
EntityId = NewType("EntityId", UUID)
