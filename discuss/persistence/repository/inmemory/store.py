"""Shared state for the in-memory repositories.

The three in-memory repositories read and write one store so that counters
kept on threads and comments stay consistent with the vote rows, the way
the tables do in PostgreSQL. The lock stands in for row locks: every
read-modify-write of counters runs while holding it.
"""

import asyncio
from typing import Dict, Tuple

from discuss.domain.model import Comment, Thread, Vote
from discuss.domain.value import CommentId, ThreadId, UserId


class InMemoryDiscussionStore:
    """Tables of the in-memory discussion backend."""

    def __init__(self) -> None:
        self.threads: Dict[ThreadId, Thread] = {}
        self.comments: Dict[CommentId, Comment] = {}
        self.votes: Dict[Tuple[CommentId, UserId], Vote] = {}
        self.lock = asyncio.Lock()
