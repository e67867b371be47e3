"""Comment entity.

Comments are rows addressed by id with a nullable parent id. Replies keep
pointing at their parent even after it is soft-deleted, so the tree shape
survives deletions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, ThreadId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)

    Counters (score, upvote_count, downvote_count, reply_count) are
    denormalized and maintained by the storage layer.

    viewer_vote_direction is a read-time projection for the requesting
    user and is never persisted.
    """

    id: CommentId
    thread_id: ThreadId
    author_user_id: UserId
    content: str
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    score: int = 0
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    is_hidden: bool = False
    is_pinned: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    edited_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    viewer_vote_direction: int = Field(default=0, ge=-1, le=1)

    @property
    def is_deleted(self) -> bool:
        """Whether the comment has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def is_edited(self) -> bool:
        """Whether the author has edited the content."""
        return self.edited_at is not None

    def as_tombstone(self, marker: str) -> "Comment":
        """Return a display copy of a deleted comment with its content masked."""
        return self.model_copy(update={"content": marker})
