"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .store import InMemoryDiscussionStore
from .thread import InMemoryThreadRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDiscussionStore",
    "InMemoryThreadRepository",
    "InMemoryCommentRepository",
    "InMemoryVoteRepository",
]
