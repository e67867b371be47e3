"""Integration tests for the PostgreSQL discussion repositories.

Run against a migrated database (alembic upgrade head) configured through
DATABASE__URL. Skipped when no database is configured.
"""

import asyncio
import os
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from discuss.domain.model import Comment, Thread
from discuss.domain.repository import (
    CommentQuery,
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from discuss.domain.service import VoteService
from discuss.domain.value import (
    CommentId,
    EntityId,
    EntityKind,
    SortMode,
    ThreadId,
    UserId,
    VoteDirection,
)
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not configured"
)

# Integration test fixture - real PostgreSQL, in-memory profiles
integration_env = create_env_fixture(unmock={"persistence"})


def _thread() -> Thread:
    return Thread(
        id=ThreadId(uuid4()),
        entity_kind=EntityKind.STORY,
        entity_id=EntityId(uuid4()),
        created_at=datetime.now(),
    )


def _comment(thread: Thread, minutes: int = 0, **kwargs) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        thread_id=thread.id,
        author_user_id=UserId(uuid4()),
        content="Integration comment",
        created_at=datetime.now() + timedelta(minutes=minutes),
        **kwargs,
    )


class TestThreadRepositoryIntegration:
    """Integration tests for PostgresThreadRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_entity_thread_rejected(self, integration_env):
        """The unique constraint keeps one thread per entity."""
        # Arrange
        thread_repo = await integration_env.get(ThreadRepository)
        thread = await thread_repo.insert(_thread())
        duplicate = thread.model_copy(update={"id": ThreadId(uuid4())})

        # Act & Assert
        with pytest.raises(IntegrityError):
            await thread_repo.insert(duplicate)

        # The savepoint keeps the session usable
        found = await thread_repo.find_by_entity(thread.entity_kind, thread.entity_id)
        assert found.id == thread.id


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_hot_order_and_tombstone_filter(self, integration_env):
        """Pinned first, then score; dead leaves are left out."""
        # Arrange
        thread_repo = await integration_env.get(ThreadRepository)
        comment_repo = await integration_env.get(CommentRepository)
        thread = await thread_repo.insert(_thread())
        pinned = await comment_repo.insert(_comment(thread, 0, is_pinned=True))
        popular = await comment_repo.insert(_comment(thread, 1, score=5, upvote_count=5))
        quiet = await comment_repo.insert(_comment(thread, 2))
        dead = await comment_repo.insert(_comment(thread, 3))
        await comment_repo.soft_delete(dead.id, datetime.now())

        # Act
        comments = await comment_repo.list_comments(
            CommentQuery(thread_id=thread.id, sort=SortMode.HOT)
        )

        # Assert
        assert [c.id for c in comments] == [pinned.id, popular.id, quiet.id]


    @pytest.mark.asyncio
    async def test_reply_count_frozen_on_deleted_comment(self, integration_env):
        """Only live comments have their reply count adjusted."""
        # Arrange
        thread_repo = await integration_env.get(ThreadRepository)
        comment_repo = await integration_env.get(CommentRepository)
        thread = await thread_repo.insert(_thread())
        live = await comment_repo.insert(_comment(thread, reply_count=1))
        tombstone = await comment_repo.insert(
            _comment(thread, deleted_at=datetime.now(), reply_count=1)
        )

        # Act
        await comment_repo.adjust_reply_count(live.id, -1)
        await comment_repo.adjust_reply_count(tombstone.id, -1)

        # Assert
        assert (await comment_repo.find_by_id(live.id)).reply_count == 0
        assert (await comment_repo.find_by_id(tombstone.id)).reply_count == 1


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_apply_vote_toggle(self, integration_env):
        """Insert, flip and remove keep the counters in step."""
        # Arrange
        thread_repo = await integration_env.get(ThreadRepository)
        comment_repo = await integration_env.get(CommentRepository)
        vote_repo = await integration_env.get(VoteRepository)
        thread = await thread_repo.insert(_thread())
        comment = await comment_repo.insert(_comment(thread))
        voter = UserId(uuid4())

        # Act
        inserted = await vote_repo.apply_vote(comment.id, voter, VoteDirection.UP)
        flipped = await vote_repo.apply_vote(comment.id, voter, VoteDirection.DOWN)
        removed = await vote_repo.apply_vote(comment.id, voter, VoteDirection.DOWN)

        # Assert
        assert (inserted.score, inserted.viewer_direction) == (1, 1)
        assert (flipped.score, flipped.viewer_direction) == (-1, -1)
        assert (removed.score, removed.viewer_direction) == (0, 0)
        stored = await comment_repo.find_by_id(comment.id)
        assert (stored.upvote_count, stored.downvote_count) == (0, 0)
        assert await vote_repo.find_by_comment(comment.id) == []

    @pytest.mark.asyncio
    async def test_concurrent_repeat_by_same_user_toggles_off(self):
        """Two sessions sending the same upvote at once leave no vote."""
        container = build_test_container(unmock={"persistence"})
        try:
            # Arrange
            async with container() as setup:
                thread_repo = await setup.get(ThreadRepository)
                comment_repo = await setup.get(CommentRepository)
                thread = await thread_repo.insert(_thread())
                comment = await comment_repo.insert(_comment(thread))
            voter = UserId(uuid4())

            async def vote():
                async with container() as request:
                    vote_service = await request.get(VoteService)
                    return await vote_service.vote(comment.id, voter, 1)

            # Act
            results = await asyncio.gather(vote(), vote())

            # Assert
            assert sorted(r.score for r in results) == [0, 1]
            async with container() as check:
                vote_repo = await check.get(VoteRepository)
                comment_repo = await check.get(CommentRepository)
                assert await vote_repo.find_by_comment(comment.id) == []
                stored = await comment_repo.find_by_id(comment.id)
                assert (stored.score, stored.upvote_count) == (0, 0)
        finally:
            await container.close()
