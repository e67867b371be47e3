"""Thread entity.

A thread is the root container of all comments attached to one story or
one profile. Threads are created lazily on first access and never deleted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import EntityId, EntityKey, EntityKind, ThreadId


class Thread(DomainModel):
    """Thread entity.

    Business rules:
    - One thread per (entity_kind, entity_id), enforced by a unique constraint
    - A locked thread accepts no new comments, top-level or replies
    """

    id: ThreadId
    entity_kind: EntityKind
    entity_id: EntityId
    is_locked: bool = False
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None

    @property
    def key(self) -> EntityKey:
        """The entity this thread is anchored to."""
        return EntityKey(kind=self.entity_kind, entity_id=self.entity_id)
