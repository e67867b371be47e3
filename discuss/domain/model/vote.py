"""Vote entity and the vote toggle law.

Each user holds at most one vote per comment. Casting the same direction
twice removes the vote; casting the opposite direction flips it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per comment (enforced by database unique constraint)
    - Direction is +1 (up) or -1 (down)
    """

    id: VoteId
    comment_id: CommentId
    user_id: UserId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None


class VoteAction(str, Enum):
    """Storage mutation required to apply a vote request."""

    INSERT = "insert"
    FLIP = "flip"
    REMOVE = "remove"


class VoteTransition(DomainModel):
    """Effect of a vote request on the vote row and the comment counters."""

    action: VoteAction
    score_delta: int
    upvote_delta: int
    downvote_delta: int
    viewer_direction: int

    @classmethod
    def resolve(
        cls, existing: Optional[VoteDirection], requested: VoteDirection
    ) -> "VoteTransition":
        """Apply the toggle law.

        - No existing vote: insert, score += requested
        - Same direction again: remove, score -= requested
        - Opposite direction: flip, score += requested - existing

        Args:
            existing: Direction of the user's current vote, if any
            requested: Direction of the new request

        Returns:
            Transition describing the mutation and counter deltas
        """
        up = 1 if requested == VoteDirection.UP else 0
        down = 1 - up

        if existing is None:
            return cls(
                action=VoteAction.INSERT,
                score_delta=int(requested),
                upvote_delta=up,
                downvote_delta=down,
                viewer_direction=int(requested),
            )

        if existing == requested:
            return cls(
                action=VoteAction.REMOVE,
                score_delta=-int(requested),
                upvote_delta=-up,
                downvote_delta=-down,
                viewer_direction=0,
            )

        return cls(
            action=VoteAction.FLIP,
            score_delta=int(requested) - int(existing),
            upvote_delta=up - down,
            downvote_delta=down - up,
            viewer_direction=int(requested),
        )


class VoteResult(DomainModel):
    """Outcome of a vote request."""

    comment_id: CommentId
    score: int
    viewer_direction: int
