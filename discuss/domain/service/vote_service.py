"""Vote domain service."""

import logfire

from discuss.domain.error import CommentNotFoundError, InvalidVoteDirectionError
from discuss.domain.model.vote import VoteResult
from discuss.domain.repository import VoteRepository
from discuss.domain.value import CommentId, UserId, VoteDirection

from .base import Service, storage_errors


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    @staticmethod
    def parse_direction(direction: object) -> VoteDirection:
        """Accept only +1 or -1.

        Raises:
            InvalidVoteDirectionError: For any other value, including booleans
        """
        if isinstance(direction, bool) or not isinstance(direction, int):
            raise InvalidVoteDirectionError(direction)
        try:
            return VoteDirection(direction)
        except ValueError:
            raise InvalidVoteDirectionError(direction)

    async def vote(
        self, comment_id: CommentId, user_id: UserId, direction: object
    ) -> VoteResult:
        """Cast, flip or withdraw a vote on a comment.

        Voting the same direction twice withdraws the vote. Voting the
        opposite direction replaces it.

        Args:
            comment_id: Comment ID
            user_id: Voter's user ID
            direction: +1 or -1

        Returns:
            The comment's new score and the viewer's resulting direction

        Raises:
            InvalidVoteDirectionError: If direction is not +1 or -1
            CommentNotFoundError: If the comment is missing or deleted
        """
        with logfire.span(
            "vote_service.vote",
            comment_id=str(comment_id),
            user_id=str(user_id),
            direction=str(direction),
        ):
            parsed = self.parse_direction(direction)

            with storage_errors("vote"):
                result = await self.vote_repository.apply_vote(
                    comment_id, user_id, parsed
                )

            if result is None:
                logfire.warn("Vote on missing comment", comment_id=str(comment_id))
                raise CommentNotFoundError(str(comment_id))

            logfire.info(
                "Vote applied",
                comment_id=str(comment_id),
                user_id=str(user_id),
                score=result.score,
                viewer_direction=result.viewer_direction,
            )
            return result
