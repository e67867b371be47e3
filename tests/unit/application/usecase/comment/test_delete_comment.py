"""Unit tests for DeleteCommentUseCase."""

import pytest

from discuss.adapter.profiles import InMemoryProfileDirectory
from discuss.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from discuss.domain.error import InsufficientPermissionError
from discuss.domain.service import CommentService
from tests.conftest import new_user_id, seed_moderator, seed_story
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for delete comment use case."""

    @pytest.mark.asyncio
    async def test_author_deletes(self, unit_env):
        """Should soft-delete the author's own comment."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        key = seed_story(directory)
        comment_service = await unit_env.get(CommentService)
        author = new_user_id()
        comment = await comment_service.create_comment(author, "Oops", entity=key)
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), user_id=str(author))
        )

        # Assert
        assert response.comment_id == str(comment.id)
        assert response.deleted is True

    @pytest.mark.asyncio
    async def test_moderator_deletes_with_profile(self, unit_env):
        """Should let a moderator delete when acting for the owner."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        key = seed_story(directory)
        moderator = seed_moderator(directory)
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            new_user_id(), "Rude remark", entity=key
        )
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(comment.id),
                user_id=str(moderator),
                profile_slug="open-science",
            )
        )

        # Assert
        assert response.deleted is True

    @pytest.mark.asyncio
    async def test_moderator_without_profile_denied(self, unit_env):
        """Should require the profile a moderator acts for."""
        # Arrange
        directory = await unit_env.get(InMemoryProfileDirectory)
        key = seed_story(directory)
        moderator = seed_moderator(directory)
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            new_user_id(), "Rude remark", entity=key
        )
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act & Assert
        with pytest.raises(InsufficientPermissionError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(moderator))
            )
