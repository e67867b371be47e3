"""Response items shared by the discussion use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.model import Comment, Thread
from discuss.domain.value import EntityKind, UserId


class CommentItem(BaseModel):
    """Comment as returned to clients."""

    comment_id: str
    thread_id: str
    parent_id: str | None
    author_user_id: str
    content: str
    depth: int
    score: int
    upvote_count: int
    downvote_count: int
    reply_count: int
    is_hidden: bool
    is_pinned: bool
    is_deleted: bool
    is_edited: bool
    created_at: datetime
    edited_at: datetime | None
    viewer_vote_direction: int

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build the response item for a comment."""
        return cls(
            comment_id=str(comment.id),
            thread_id=str(comment.thread_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_user_id=str(comment.author_user_id),
            content=comment.content,
            depth=comment.depth,
            score=comment.score,
            upvote_count=comment.upvote_count,
            downvote_count=comment.downvote_count,
            reply_count=comment.reply_count,
            is_hidden=comment.is_hidden,
            is_pinned=comment.is_pinned,
            is_deleted=comment.is_deleted,
            is_edited=comment.is_edited,
            created_at=comment.created_at,
            edited_at=comment.edited_at,
            viewer_vote_direction=comment.viewer_vote_direction,
        )


class ThreadItem(BaseModel):
    """Thread as returned to clients."""

    thread_id: str
    entity_kind: EntityKind
    entity_id: str
    is_locked: bool
    comment_count: int
    created_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadItem":
        """Build the response item for a thread."""
        return cls(
            thread_id=str(thread.id),
            entity_kind=thread.entity_kind,
            entity_id=str(thread.entity_id),
            is_locked=thread.is_locked,
            comment_count=thread.comment_count,
            created_at=thread.created_at,
        )


def parse_user_id(user_id: Optional[str]) -> Optional[UserId]:
    """Convert an optional user ID string to a UserId."""
    return UserId(UUID(user_id)) if user_id else None
