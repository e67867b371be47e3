"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from discuss.domain.model.vote import Vote, VoteResult
from discuss.domain.value import CommentId, UserId, VoteDirection


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment.

        Args:
            comment_id: The comment ID
            user_id: The voter's user ID

        Returns:
            The vote if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            List of votes
        """
        pass

    @abstractmethod
    async def find_directions(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Find a user's vote directions on multiple comments (batch query).

        Args:
            user_id: The voter's user ID
            comment_ids: Comments to look up

        Returns:
            Mapping of comment ID to direction, only for comments voted on
        """
        pass

    @abstractmethod
    async def apply_vote(
        self, comment_id: CommentId, user_id: UserId, direction: VoteDirection
    ) -> Optional[VoteResult]:
        """Apply a vote request using the toggle law.

        Reading the existing vote, mutating the vote row and adjusting the
        comment counters happen as one atomic unit, so concurrent requests
        for the same comment never lose an update.

        Args:
            comment_id: The comment being voted on
            user_id: The voter's user ID
            direction: Requested direction

        Returns:
            The new score and viewer direction, None if the comment is
            missing or deleted
        """
        pass
