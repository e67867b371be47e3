"""Repository interfaces for the discussion engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from discuss.domain.repository.comment import CommentQuery, CommentRepository
from discuss.domain.repository.thread import ThreadRepository
from discuss.domain.repository.vote import VoteRepository

__all__ = [
    "ThreadRepository",
    "CommentRepository",
    "CommentQuery",
    "VoteRepository",
]
