"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence
from uuid import uuid4

from discuss.domain.model.vote import Vote, VoteAction, VoteResult, VoteTransition
from discuss.domain.repository.vote import VoteRepository
from discuss.domain.value import CommentId, UserId, VoteDirection, VoteId

from .store import InMemoryDiscussionStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryDiscussionStore) -> None:
        self.store = store

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        return self.store.votes.get((comment_id, user_id))

    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment."""
        return [v for v in self.store.votes.values() if v.comment_id == comment_id]

    async def find_directions(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Find a user's vote directions on multiple comments."""
        directions = {}
        for comment_id in comment_ids:
            vote = self.store.votes.get((comment_id, user_id))
            if vote is not None:
                directions[comment_id] = int(vote.direction)
        return directions

    async def apply_vote(
        self, comment_id: CommentId, user_id: UserId, direction: VoteDirection
    ) -> Optional[VoteResult]:
        """Apply a vote request while holding the store lock."""
        async with self.store.lock:
            comment = self.store.comments.get(comment_id)
            if comment is None or comment.is_deleted:
                return None

            key = (comment_id, user_id)
            existing = self.store.votes.get(key)
            transition = VoteTransition.resolve(
                existing.direction if existing else None, direction
            )
            now = datetime.now()

            if transition.action == VoteAction.INSERT:
                self.store.votes[key] = Vote(
                    id=VoteId(uuid4()),
                    comment_id=comment_id,
                    user_id=user_id,
                    direction=direction,
                    created_at=now,
                )
            elif transition.action == VoteAction.REMOVE:
                del self.store.votes[key]
            elif existing is not None:
                self.store.votes[key] = existing.model_copy(
                    update={"direction": direction, "updated_at": now}
                )

            updated = comment.model_copy(
                update={
                    "score": comment.score + transition.score_delta,
                    "upvote_count": comment.upvote_count + transition.upvote_delta,
                    "downvote_count": comment.downvote_count
                    + transition.downvote_delta,
                }
            )
            self.store.comments[comment_id] = updated

            return VoteResult(
                comment_id=comment_id,
                score=updated.score,
                viewer_direction=transition.viewer_direction,
            )
