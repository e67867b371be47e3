"""Unit tests for CreateCommentUseCase."""

import pytest

from discuss.adapter.profiles import InMemoryProfileDirectory
from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import (
    ContentTooLongError,
    DiscussionsNotEnabledError,
    ThreadNotFoundError,
)
from discuss.domain.repository import ThreadRepository
from discuss.domain.value import EntityKind
from tests.conftest import new_user_id, seed_story
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for create comment use case."""

    @pytest.mark.asyncio
    async def test_create_comment_on_story(self, unit_env):
        """Should create a top-level comment and its thread."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        key = seed_story(directory)
        use_case = await unit_env.get(CreateCommentUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        author = new_user_id()

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                entity_kind=EntityKind.STORY,
                slug="hello-world",
                author_user_id=str(author),
                content="  Fascinating work  ",
            )
        )

        # Assert
        comment = response.comment
        assert comment.content == "Fascinating work"
        assert comment.author_user_id == str(author)
        assert comment.depth == 0
        assert comment.parent_id is None
        assert comment.score == 0
        assert comment.is_edited is False
        thread = await thread_repo.find_by_entity(key.kind, key.entity_id)
        assert comment.thread_id == str(thread.id)

    @pytest.mark.asyncio
    async def test_create_comment_on_profile(self, unit_env):
        """Should comment on a profile's own discussion."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        directory.add_profile("open-science")
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                entity_kind=EntityKind.PROFILE,
                slug="open-science",
                author_user_id=str(new_user_id()),
                content="Love this lab",
            )
        )

        # Assert
        assert response.comment.depth == 0

    @pytest.mark.asyncio
    async def test_unknown_story_raises(self, unit_env):
        """Should fail for unknown slugs."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(ThreadNotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    entity_kind=EntityKind.STORY,
                    slug="missing",
                    author_user_id=str(new_user_id()),
                    content="Hello?",
                )
            )

    @pytest.mark.asyncio
    async def test_disabled_discussions_raise(self, unit_env):
        """Should fail when the owning profile has discussions off."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        seed_story(directory, discussions_enabled=False)
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(DiscussionsNotEnabledError):
            await use_case.execute(
                CreateCommentRequest(
                    entity_kind=EntityKind.STORY,
                    slug="hello-world",
                    author_user_id=str(new_user_id()),
                    content="Anyone home?",
                )
            )

    @pytest.mark.asyncio
    async def test_content_too_long_raises(self, unit_env):
        """Should reject content over the limit."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        seed_story(directory)
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(ContentTooLongError):
            await use_case.execute(
                CreateCommentRequest(
                    entity_kind=EntityKind.STORY,
                    slug="hello-world",
                    author_user_id=str(new_user_id()),
                    content="x" * 100_000,
                )
            )
