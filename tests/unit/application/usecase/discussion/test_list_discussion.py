"""Unit tests for ListDiscussionUseCase."""

from uuid import UUID

import pytest

from discuss.adapter.profiles import InMemoryProfileDirectory
from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.application.usecase.discussion import (
    ListDiscussionRequest,
    ListDiscussionUseCase,
)
from discuss.config import DiscussionSettings
from discuss.domain.error import DiscussionsNotEnabledError, ThreadNotFoundError
from discuss.domain.service import ModerationService
from discuss.domain.value import EntityKind, SortMode
from tests.conftest import new_user_id, seed_moderator, seed_story
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _post(unit_env, content, slug="hello-world"):
    use_case = await unit_env.get(CreateCommentUseCase)
    response = await use_case.execute(
        CreateCommentRequest(
            entity_kind=EntityKind.STORY,
            slug=slug,
            author_user_id=str(new_user_id()),
            content=content,
        )
    )
    return response.comment


class TestListDiscussionUseCase:
    """Tests for list discussion use case."""

    @pytest.mark.asyncio
    async def test_empty_discussion_creates_thread(self, unit_env):
        """Reading an untouched story returns an empty, unlocked thread."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        seed_story(directory)
        use_case = await unit_env.get(ListDiscussionUseCase)
        settings = await unit_env.get(DiscussionSettings)

        # Act
        response = await use_case.execute(
            ListDiscussionRequest(entity_kind=EntityKind.STORY, slug="hello-world")
        )

        # Assert
        assert response.comments == []
        assert response.thread.is_locked is False
        assert response.thread.comment_count == 0
        assert response.can_moderate is False
        assert response.sort == settings.default_sort
        assert response.limit == settings.default_page_limit

    @pytest.mark.asyncio
    async def test_lists_top_level_comments_only(self, unit_env):
        """Replies are not part of the top-level listing."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        seed_story(directory)
        top = await _post(unit_env, "Top level comment")
        use_case = await unit_env.get(ListDiscussionUseCase)

        # Act
        response = await use_case.execute(
            ListDiscussionRequest(
                entity_kind=EntityKind.STORY, slug="hello-world", sort=SortMode.NEW
            )
        )

        # Assert
        assert [c.comment_id for c in response.comments] == [top.comment_id]
        assert response.thread.comment_count == 1

    @pytest.mark.asyncio
    async def test_moderator_sees_hidden_comments(self, unit_env):
        """Moderators get hidden comments and the can_moderate flag."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        seed_story(directory)
        moderator = seed_moderator(directory)
        comment = await _post(unit_env, "Borderline comment")
        moderation_service = await unit_env.get(ModerationService)
        await moderation_service.hide_comment(
            UUID(comment.comment_id), moderator, "open-science", True
        )
        use_case = await unit_env.get(ListDiscussionUseCase)

        # Act
        as_moderator = await use_case.execute(
            ListDiscussionRequest(
                entity_kind=EntityKind.STORY,
                slug="hello-world",
                viewer_user_id=str(moderator),
            )
        )
        as_reader = await use_case.execute(
            ListDiscussionRequest(
                entity_kind=EntityKind.STORY,
                slug="hello-world",
                viewer_user_id=str(new_user_id()),
            )
        )

        # Assert
        assert as_moderator.can_moderate is True
        assert [c.is_hidden for c in as_moderator.comments] == [True]
        assert as_reader.can_moderate is False
        assert as_reader.comments == []

    @pytest.mark.asyncio
    async def test_profile_discussion(self, unit_env):
        """Profiles carry their own discussion."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        directory.add_profile("open-science")
        use_case = await unit_env.get(ListDiscussionUseCase)

        # Act
        response = await use_case.execute(
            ListDiscussionRequest(entity_kind=EntityKind.PROFILE, slug="open-science")
        )

        # Assert
        assert response.thread.entity_kind == EntityKind.PROFILE

    @pytest.mark.asyncio
    async def test_unknown_entity_raises(self, unit_env):
        """Unknown slugs have no discussion."""
        # Arrange
        use_case = await unit_env.get(ListDiscussionUseCase)

        # Act & Assert
        with pytest.raises(ThreadNotFoundError):
            await use_case.execute(
                ListDiscussionRequest(entity_kind=EntityKind.STORY, slug="missing")
            )

    @pytest.mark.asyncio
    async def test_disabled_profile_raises(self, unit_env):
        """Discussions of disabled profiles cannot be read."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        seed_story(directory, discussions_enabled=False)
        use_case = await unit_env.get(ListDiscussionUseCase)

        # Act & Assert
        with pytest.raises(DiscussionsNotEnabledError):
            await use_case.execute(
                ListDiscussionRequest(entity_kind=EntityKind.STORY, slug="hello-world")
            )
