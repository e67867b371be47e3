"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence
from uuid import uuid4

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Vote, VoteAction, VoteResult, VoteTransition
from discuss.domain.repository import VoteRepository
from discuss.domain.value import CommentId, UserId, VoteDirection, VoteId
from discuss.persistence.mappers import row_to_vote, vote_to_dict
from discuss.persistence.tables import comments_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.comment_id == comment_id,
                votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment."""
        stmt = select(votes_table).where(votes_table.c.comment_id == comment_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_directions(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Find a user's vote directions on multiple comments (batch query)."""
        if not comment_ids:
            return {}

        stmt = select(votes_table.c.comment_id, votes_table.c.direction).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {
            CommentId(row.comment_id): int(row.direction) for row in result.fetchall()
        }

    async def apply_vote(
        self, comment_id: CommentId, user_id: UserId, direction: VoteDirection
    ) -> Optional[VoteResult]:
        """Apply a vote request under a row lock on the comment.

        SELECT ... FOR UPDATE on the comment serializes concurrent votes on
        it until the request transaction ends.
        """
        lock = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .with_for_update()
        )
        result = await self.session.execute(lock)
        if result.first() is None:
            return None

        existing = await self.find_by_comment_and_user(comment_id, user_id)
        transition = VoteTransition.resolve(
            existing.direction if existing else None, direction
        )
        now = datetime.now()

        if transition.action == VoteAction.INSERT:
            vote = Vote(
                id=VoteId(uuid4()),
                comment_id=comment_id,
                user_id=user_id,
                direction=direction,
                created_at=now,
            )
            await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
        elif existing is not None and transition.action == VoteAction.REMOVE:
            await self.session.execute(
                delete(votes_table).where(votes_table.c.id == existing.id)
            )
        elif existing is not None:
            await self.session.execute(
                update(votes_table)
                .where(votes_table.c.id == existing.id)
                .values(direction=int(direction), updated_at=now)
            )

        counters = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                score=comments_table.c.score + transition.score_delta,
                upvote_count=comments_table.c.upvote_count + transition.upvote_delta,
                downvote_count=comments_table.c.downvote_count
                + transition.downvote_delta,
            )
            .returning(comments_table.c.score)
        )
        score = (await self.session.execute(counters)).scalar_one()
        await self.session.flush()

        return VoteResult(
            comment_id=comment_id,
            score=score,
            viewer_direction=transition.viewer_direction,
        )
