"""Domain model entities for discussions."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.thread import Thread
from discuss.domain.model.vote import Vote, VoteAction, VoteResult, VoteTransition

__all__ = [
    "Thread",
    "Comment",
    "Vote",
    "VoteAction",
    "VoteResult",
    "VoteTransition",
]
