"""Vote on comment use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import VoteService
from discuss.domain.value import CommentId, UserId


class VoteCommentRequest(BaseModel):
    """Vote on comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    direction: Any  # +1 or -1, validated by the vote service


class VoteCommentResponse(BaseModel):
    """Vote on comment response."""

    comment_id: str
    score: int
    viewer_direction: int  # 0 when the vote was withdrawn


class VoteCommentUseCase:
    """Use case for casting, flipping or withdrawing a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        Raises:
            InvalidVoteDirectionError: If direction is not +1 or -1
            CommentNotFoundError: If the comment is missing or deleted
        """
        result = await self.vote_service.vote(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
            direction=request.direction,
        )
        return VoteCommentResponse(
            comment_id=str(result.comment_id),
            score=result.score,
            viewer_direction=result.viewer_direction,
        )
