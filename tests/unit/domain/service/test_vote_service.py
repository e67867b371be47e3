"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from discuss.adapter.profiles import InMemoryProfileDirectory
from discuss.domain.error import CommentNotFoundError, InvalidVoteDirectionError
from discuss.domain.repository import CommentRepository, VoteRepository
from discuss.domain.service import CommentService, ThreadService, VoteService
from discuss.domain.value import CommentId, VoteDirection
from tests.conftest import new_user_id, seed_story
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _comment(unit_env, author=None):
    directory = await unit_env.get(InMemoryProfileDirectory)
    key = seed_story(directory)
    comment_service = await unit_env.get(CommentService)
    return await comment_service.create_comment(
        author or new_user_id(), "Worth voting on", entity=key
    )


class TestParseDirection:
    """Tests for direction validation."""

    @pytest.mark.parametrize("value", [0, 2, -2, "1", 1.0, True, False, None])
    def test_rejects_anything_but_plus_or_minus_one(self, value):
        """Only the integers +1 and -1 are directions."""
        # Act & Assert
        with pytest.raises(InvalidVoteDirectionError):
            VoteService.parse_direction(value)

    @pytest.mark.parametrize("value", [1, -1])
    def test_accepts_unit_integers(self, value):
        """+1 and -1 parse to directions."""
        # Act
        direction = VoteService.parse_direction(value)

        # Assert
        assert direction == VoteDirection(value)


class TestVote:
    """Tests for vote method."""

    @pytest.mark.asyncio
    async def test_upvote_then_repeat_withdraws(self, unit_env):
        """Voting up twice returns the comment to its original score."""
        # Arrange
        comment = await _comment(unit_env)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        voter = new_user_id()

        # Act
        first = await vote_service.vote(comment.id, voter, 1)
        second = await vote_service.vote(comment.id, voter, 1)

        # Assert
        assert (first.score, first.viewer_direction) == (1, 1)
        assert (second.score, second.viewer_direction) == (0, 0)
        assert await vote_repo.find_by_comment_and_user(comment.id, voter) is None

    @pytest.mark.asyncio
    async def test_flip_moves_score_by_two(self, unit_env):
        """Switching from up to down moves the score by two."""
        # Arrange
        comment = await _comment(unit_env)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        voter = new_user_id()
        await vote_service.vote(comment.id, voter, 1)

        # Act
        result = await vote_service.vote(comment.id, voter, -1)

        # Assert
        assert result.score == -1
        assert result.viewer_direction == -1
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.upvote_count == 0
        assert stored.downvote_count == 1

    @pytest.mark.asyncio
    async def test_one_vote_per_user(self, unit_env):
        """A user never holds two votes on the same comment."""
        # Arrange
        comment = await _comment(unit_env)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        voter = new_user_id()

        # Act
        for direction in (1, -1, -1, 1, -1):
            await vote_service.vote(comment.id, voter, direction)

        # Assert
        votes = await vote_repo.find_by_comment(comment.id)
        assert len(votes) == 1
        assert votes[0].direction == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_score_matches_votes_across_users(self, unit_env):
        """The score equals upvotes minus downvotes."""
        # Arrange
        comment = await _comment(unit_env)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)

        # Act
        for direction in (1, 1, 1, -1):
            await vote_service.vote(comment.id, new_user_id(), direction)

        # Assert
        stored = await comment_repo.find_by_id(comment.id)
        votes = await vote_repo.find_by_comment(comment.id)
        assert stored.score == 2
        assert stored.upvote_count == 3
        assert stored.downvote_count == 1
        assert stored.score == sum(int(v.direction) for v in votes)

    @pytest.mark.asyncio
    async def test_concurrent_votes_are_all_counted(self, unit_env):
        """Votes racing on one comment are never lost."""
        # Arrange
        comment = await _comment(unit_env)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        voters = [new_user_id() for _ in range(20)]

        # Act
        await asyncio.gather(*(vote_service.vote(comment.id, v, 1) for v in voters))

        # Assert
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.score == 20
        assert stored.upvote_count == 20

    @pytest.mark.asyncio
    async def test_concurrent_repeat_by_same_user_toggles_off(self, unit_env):
        """The same upvote sent twice at once ends with no vote."""
        # Arrange
        comment = await _comment(unit_env)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        voter = new_user_id()

        # Act
        results = await asyncio.gather(
            vote_service.vote(comment.id, voter, 1),
            vote_service.vote(comment.id, voter, 1),
        )

        # Assert
        assert sorted(r.score for r in results) == [0, 1]
        assert await vote_repo.find_by_comment(comment.id) == []
        stored = await comment_repo.find_by_id(comment.id)
        assert (stored.score, stored.upvote_count) == (0, 0)

    @pytest.mark.asyncio
    async def test_self_vote_allowed(self, unit_env):
        """Authors may vote on their own comments."""
        # Arrange
        author = new_user_id()
        comment = await _comment(unit_env, author=author)
        vote_service = await unit_env.get(VoteService)

        # Act
        result = await vote_service.vote(comment.id, author, 1)

        # Assert
        assert result.score == 1

    @pytest.mark.asyncio
    async def test_vote_on_locked_thread_allowed(self, unit_env):
        """Locking a thread does not stop voting."""
        # Arrange
        comment = await _comment(unit_env)
        thread_service = await unit_env.get(ThreadService)
        vote_service = await unit_env.get(VoteService)
        await thread_service.set_locked(comment.thread_id, True)

        # Act
        result = await vote_service.vote(comment.id, new_user_id(), -1)

        # Assert
        assert result.score == -1

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_raises(self, unit_env):
        """Voting on an unknown comment fails."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(CommentNotFoundError):
            await vote_service.vote(CommentId(uuid4()), new_user_id(), 1)

    @pytest.mark.asyncio
    async def test_vote_on_deleted_comment_raises(self, unit_env):
        """Tombstones cannot be voted on."""
        # Arrange
        author = new_user_id()
        comment = await _comment(unit_env, author=author)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        await comment_service.delete_comment(comment.id, author)

        # Act & Assert
        with pytest.raises(CommentNotFoundError):
            await vote_service.vote(comment.id, new_user_id(), 1)

    @pytest.mark.asyncio
    async def test_invalid_direction_changes_nothing(self, unit_env):
        """A rejected direction leaves the score untouched."""
        # Arrange
        comment = await _comment(unit_env)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        with pytest.raises(InvalidVoteDirectionError):
            await vote_service.vote(comment.id, new_user_id(), 0)

        # Assert
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.score == 0
