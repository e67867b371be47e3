"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
with SQLAlchemy Core instead of ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from discuss.domain.model import Comment, Thread, Vote
from discuss.domain.value import (
    CommentId,
    EntityId,
    EntityKind,
    ThreadId,
    UserId,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        entity_kind=EntityKind(row["entity_kind"]),
        entity_id=EntityId(_uuid(row["entity_id"])),
        is_locked=row["is_locked"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict."""
    data = thread.model_dump()
    data["entity_kind"] = thread.entity_kind.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        author_user_id=UserId(_uuid(row["author_user_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        depth=row["depth"],
        score=row["score"],
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        reply_count=row["reply_count"],
        is_hidden=row["is_hidden"],
        is_pinned=row["is_pinned"],
        created_at=row["created_at"],
        edited_at=row.get("edited_at"),
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The viewer projection is not a column.
    """
    return comment.model_dump(exclude={"viewer_vote_direction"})


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["direction"] = int(vote.direction)
    return data
