"""End-to-end tests for discussion flows over HTTP."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from discuss.adapter.profiles import InMemoryProfileDirectory
from discuss.config import DiscussionSettings, Settings
from discuss.domain.service import JWTService
from discuss.interface.api.app import create_app
from tests.conftest import new_user_id, seed_moderator, seed_story
from tests.di import build_test_container


@pytest.fixture
def container():
    """Container with in-memory persistence and profiles."""
    container = build_test_container()
    yield container
    asyncio.run(container.close())


@pytest.fixture
def directory(container):
    """Seedable profile directory shared with the app."""
    return asyncio.run(container.get(InMemoryProfileDirectory))


@pytest.fixture
def client(container, directory):
    """Test client with one story on a discussions-enabled profile."""
    seed_story(directory, "hello-world", "open-science")
    return TestClient(create_app(container))


def login(client: TestClient, user_id=None) -> str:
    """Authenticate the client as a user and return the user ID."""
    user_id = str(user_id or new_user_id())
    token = JWTService(Settings().auth).create_token(user_id)
    client.cookies.set("auth_token", token)
    return user_id


def post_comment(client: TestClient, content: str, slug: str = "hello-world"):
    return client.post(
        f"/stories/{slug}/discussions/comments", json={"content": content}
    )


class TestDiscussionFlow:
    """End-to-end tests for commenting, replying and voting."""

    def test_first_comment_creates_thread(self, client):
        """Commenting on a story creates its thread and a depth 0 comment."""
        # Arrange
        author = login(client)

        # Act
        response = post_comment(client, "Nice post!")

        # Assert
        assert response.status_code == 201
        comment = response.json()["comment"]
        assert comment["depth"] == 0
        assert comment["score"] == 0
        assert comment["parent_id"] is None
        assert comment["author_user_id"] == author

        listing = client.get("/stories/hello-world/discussions").json()
        assert listing["thread"]["comment_count"] == 1
        assert [c["comment_id"] for c in listing["comments"]] == [
            comment["comment_id"]
        ]

    def test_reply_nests_under_parent(self, client):
        """A reply sits at depth 1 under its parent."""
        # Arrange
        login(client)
        parent = post_comment(client, "Nice post!").json()["comment"]

        # Act
        response = client.post(
            f"/discussions/comments/{parent['comment_id']}/replies",
            json={"content": "Agreed"},
        )

        # Assert
        assert response.status_code == 201
        reply = response.json()["comment"]
        assert reply["depth"] == 1
        assert reply["parent_id"] == parent["comment_id"]

        replies = client.get(
            f"/discussions/comments/{parent['comment_id']}/replies"
        ).json()
        assert [r["comment_id"] for r in replies["replies"]] == [reply["comment_id"]]
        assert replies["parent"]["reply_count"] == 1

    def test_reply_through_story_route(self, client):
        """Replies can be addressed through the story they belong to."""
        # Arrange
        login(client)
        parent = post_comment(client, "Nice post!").json()["comment"]

        # Act
        response = client.post(
            "/stories/hello-world/discussions/comments/"
            f"{parent['comment_id']}/replies",
            json={"content": "Agreed"},
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["comment"]["parent_id"] == parent["comment_id"]

    def test_votes_accumulate_and_toggle(self, client):
        """Two upvotes give 2; repeating one withdraws it."""
        # Arrange
        login(client)
        comment = post_comment(client, "Nice post!").json()["comment"]
        vote_url = f"/discussions/comments/{comment['comment_id']}/vote"
        first_voter = new_user_id()

        # Act
        login(client, first_voter)
        client.post(vote_url, json={"direction": 1})
        login(client)
        second = client.post(vote_url, json={"direction": 1})
        login(client, first_voter)
        again = client.post(vote_url, json={"direction": 1})

        # Assert
        assert second.json()["score"] == 2
        assert again.status_code == 200
        assert again.json() == {
            "comment_id": comment["comment_id"],
            "score": 1,
            "viewer_direction": 0,
        }

    def test_viewer_vote_direction_in_listing(self, client):
        """Listings tell the viewer how they voted."""
        # Arrange
        login(client)
        comment = post_comment(client, "Nice post!").json()["comment"]
        login(client)
        client.post(
            f"/discussions/comments/{comment['comment_id']}/vote",
            json={"direction": -1},
        )

        # Act
        listing = client.get("/stories/hello-world/discussions").json()

        # Assert
        assert listing["comments"][0]["viewer_vote_direction"] == -1
        assert listing["comments"][0]["score"] == -1

    def test_invalid_vote_direction(self, client):
        """Only +1 and -1 are accepted."""
        # Arrange
        login(client)
        comment = post_comment(client, "Nice post!").json()["comment"]

        # Act
        response = client.post(
            f"/discussions/comments/{comment['comment_id']}/vote",
            json={"direction": 0},
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_vote_direction"

    def test_content_bounds(self, client):
        """Too short and too long content is rejected."""
        # Arrange
        login(client)

        # Act
        short = post_comment(client, "x")
        long = post_comment(client, "x" * 10_000)

        # Assert
        assert short.status_code == 400
        assert short.json()["error"] == "content_too_short"
        assert long.status_code == 400
        assert long.json()["error"] == "content_too_long"

    def test_max_nesting_depth(self, client, container):
        """Replies stop at the configured depth."""
        # Arrange
        settings = asyncio.run(container.get(DiscussionSettings))
        login(client)
        current = post_comment(client, "Depth zero").json()["comment"]
        for _ in range(settings.max_nesting_depth):
            current = client.post(
                f"/discussions/comments/{current['comment_id']}/replies",
                json={"content": "One deeper"},
            ).json()["comment"]
        assert current["depth"] == settings.max_nesting_depth

        # Act
        response = client.post(
            f"/discussions/comments/{current['comment_id']}/replies",
            json={"content": "Too deep"},
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "max_nesting_depth"

    def test_anonymous_can_read_but_not_write(self, client):
        """Reading is public, writing needs a token."""
        # Act
        listing = client.get("/stories/hello-world/discussions")
        create = post_comment(client, "Who am I?")

        # Assert
        assert listing.status_code == 200
        assert listing.json()["comments"] == []
        assert create.status_code == 401

    def test_unknown_story_is_not_found(self, client):
        """Unknown slugs answer 404."""
        # Act
        response = client.get("/stories/missing/discussions")

        # Assert
        assert response.status_code == 404
        assert response.json()["error"] == "thread_not_found"

    def test_disabled_discussions_are_not_found(self, client, directory):
        """Profiles with discussions off expose nothing."""
        # Arrange
        seed_story(directory, "quiet-story", "quiet-lab", discussions_enabled=False)

        # Act
        response = client.get("/stories/quiet-story/discussions")

        # Assert
        assert response.status_code == 404
        assert response.json()["error"] == "discussions_not_enabled"

    def test_edit_and_delete_own_comment(self, client):
        """Authors edit and soft-delete their comments."""
        # Arrange
        login(client)
        comment = post_comment(client, "First draft").json()["comment"]
        url = f"/discussions/comments/{comment['comment_id']}"

        # Act
        edited = client.patch(url, json={"content": "Second draft"})
        deleted = client.delete(url)

        # Assert
        assert edited.status_code == 200
        assert edited.json()["comment"]["is_edited"] is True
        assert deleted.json() == {"comment_id": comment["comment_id"], "deleted": True}
        listing = client.get("/stories/hello-world/discussions").json()
        assert listing["comments"] == []

    def test_edit_by_other_user_forbidden(self, client):
        """Non-authors cannot edit."""
        # Arrange
        login(client)
        comment = post_comment(client, "Mine").json()["comment"]
        login(client)

        # Act
        response = client.patch(
            f"/discussions/comments/{comment['comment_id']}",
            json={"content": "Yours"},
        )

        # Assert
        assert response.status_code == 403


class TestModerationFlow:
    """End-to-end tests for moderation."""

    def test_locked_thread_rejects_comments_keeps_listing(self, client, directory):
        """After a lock, new comments fail and old ones stay listed."""
        # Arrange
        moderator = seed_moderator(directory, "open-science")
        login(client)
        comment = post_comment(client, "Before the lock").json()["comment"]
        login(client, moderator)

        # Act
        locked = client.put(
            f"/discussions/threads/{comment['thread_id']}/lock",
            json={"profile_slug": "open-science", "is_locked": True},
        )
        login(client)
        rejected = post_comment(client, "After the lock")
        listing = client.get("/stories/hello-world/discussions").json()

        # Assert
        assert locked.status_code == 200
        assert locked.json()["thread"]["is_locked"] is True
        assert rejected.status_code == 403
        assert rejected.json()["error"] == "thread_locked"
        assert [c["comment_id"] for c in listing["comments"]] == [
            comment["comment_id"]
        ]

    def test_hidden_comment_visible_to_moderators_only(self, client, directory):
        """Hidden comments drop out of public listings."""
        # Arrange
        moderator = seed_moderator(directory, "open-science")
        login(client)
        comment = post_comment(client, "Questionable").json()["comment"]
        login(client, moderator)

        # Act
        hidden = client.put(
            f"/discussions/comments/{comment['comment_id']}/hide",
            json={"profile_slug": "open-science", "is_hidden": True},
        )
        as_moderator = client.get("/stories/hello-world/discussions").json()
        client.cookies.clear()
        as_public = client.get("/stories/hello-world/discussions").json()

        # Assert
        assert hidden.json()["comment"]["is_hidden"] is True
        assert as_moderator["can_moderate"] is True
        assert len(as_moderator["comments"]) == 1
        assert as_public["comments"] == []

    def test_pin_without_standing_forbidden(self, client):
        """Regular users cannot pin."""
        # Arrange
        login(client)
        comment = post_comment(client, "Pin me").json()["comment"]

        # Act
        response = client.put(
            f"/discussions/comments/{comment['comment_id']}/pin",
            json={"profile_slug": "open-science", "is_pinned": True},
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["error"] == "insufficient_permission"

    def test_moderator_deletes_comment_leaving_tombstone(self, client, directory):
        """Deleted parents with replies remain as tombstones."""
        # Arrange
        moderator = seed_moderator(directory, "open-science")
        login(client)
        parent = post_comment(client, "Parent").json()["comment"]
        client.post(
            f"/discussions/comments/{parent['comment_id']}/replies",
            json={"content": "Child"},
        )
        login(client, moderator)

        # Act
        deleted = client.delete(
            f"/discussions/comments/{parent['comment_id']}",
            params={"profile_slug": "open-science"},
        )
        listing = client.get("/stories/hello-world/discussions").json()

        # Assert
        assert deleted.status_code == 200
        assert len(listing["comments"]) == 1
        tombstone = listing["comments"][0]
        assert tombstone["is_deleted"] is True
        assert tombstone["content"] == "[deleted]"
        assert tombstone["reply_count"] == 1
