"""SQLAlchemy table definitions for discussions.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

The profiles, stories and profile_memberships tables belong to the
profiles subsystem; only the columns read here are declared.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# DISCUSSION THREADS TABLE (one per story or profile)
# ============================================================================
threads_table = Table(
    "discussion_threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("entity_kind", String(20), nullable=False),  # 'story' or 'profile'
    Column("entity_id", UUID, nullable=False),
    Column("is_locked", Boolean, nullable=False, server_default="false"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("entity_kind", "entity_id", name="uq_discussion_thread_entity"),
    CheckConstraint(
        "entity_kind IN ('story', 'profile')", name="check_thread_entity_kind"
    ),
)

# ============================================================================
# DISCUSSION COMMENTS TABLE (threaded via parent_id)
# ============================================================================
comments_table = Table(
    "discussion_comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "thread_id",
        UUID,
        ForeignKey("discussion_threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID,
        ForeignKey("discussion_comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author_user_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("is_hidden", Boolean, nullable=False, server_default="false"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("depth >= 0", name="check_comment_depth"),
    CheckConstraint(
        "(parent_id IS NULL) = (depth = 0)", name="check_comment_parent_depth"
    ),
)

Index(
    "idx_discussion_comments_thread_parent",
    comments_table.c.thread_id,
    comments_table.c.parent_id,
)
Index("idx_discussion_comments_parent_id", comments_table.c.parent_id)
Index("idx_discussion_comments_author", comments_table.c.author_user_id)
Index("idx_discussion_comments_created_at", comments_table.c.created_at)

# ============================================================================
# DISCUSSION COMMENT VOTES TABLE (one vote per user per comment)
# ============================================================================
votes_table = Table(
    "discussion_comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("discussion_comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column("direction", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("comment_id", "user_id", name="uq_discussion_vote"),
    CheckConstraint("direction IN (-1, 1)", name="check_vote_direction"),
)

Index("idx_discussion_votes_user_id", votes_table.c.user_id)

# ============================================================================
# PROFILES SUBSYSTEM (read-only)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("slug", String(100), nullable=False),
    Column("feature_discussions", Boolean, nullable=False, server_default="false"),
    info={"external": True},
)

stories_table = Table(
    "stories",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("slug", String(100), nullable=False),
    Column("author_profile_id", UUID, nullable=False),
    info={"external": True},
)

profile_memberships_table = Table(
    "profile_memberships",
    metadata,
    Column("profile_id", UUID, primary_key=True),
    Column("user_id", UUID, primary_key=True),
    Column("kind", String(20), nullable=False),  # 'follower' ... 'owner'
    info={"external": True},
)
