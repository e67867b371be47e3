"""discussions_schema

Create the discussion engine schema:
- Discussion threads (one per story or profile)
- Discussion comments (threaded via parent_id, soft-deleted)
- Discussion comment votes (one vote per user per comment, +1 or -1)

The profiles, stories and profile_memberships tables are owned by the
profiles subsystem and are not created here.

Revision ID: 3c41d7e09a52
Revises:
Create Date: 2026-10-19 10:12:44.512031

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c41d7e09a52"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # DISCUSSION THREADS table
    # ========================================================================
    op.create_table(
        "discussion_threads",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("entity_kind", sa.String(20), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("is_locked", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "entity_kind", "entity_id", name="uq_discussion_thread_entity"
        ),
        sa.CheckConstraint(
            "entity_kind IN ('story', 'profile')", name="check_thread_entity_kind"
        ),
    )

    # ========================================================================
    # DISCUSSION COMMENTS table
    # ========================================================================
    op.create_table(
        "discussion_comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_user_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["thread_id"], ["discussion_threads.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["discussion_comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="check_comment_depth"),
        sa.CheckConstraint(
            "(parent_id IS NULL) = (depth = 0)", name="check_comment_parent_depth"
        ),
    )
    op.create_index(
        "idx_discussion_comments_thread_parent",
        "discussion_comments",
        ["thread_id", "parent_id"],
    )
    op.create_index(
        "idx_discussion_comments_parent_id", "discussion_comments", ["parent_id"]
    )
    op.create_index(
        "idx_discussion_comments_author", "discussion_comments", ["author_user_id"]
    )
    op.create_index(
        "idx_discussion_comments_created_at", "discussion_comments", ["created_at"]
    )

    # ========================================================================
    # DISCUSSION COMMENT VOTES table
    # ========================================================================
    op.create_table(
        "discussion_comment_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("direction", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["discussion_comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("comment_id", "user_id", name="uq_discussion_vote"),
        sa.CheckConstraint("direction IN (-1, 1)", name="check_vote_direction"),
    )
    op.create_index(
        "idx_discussion_votes_user_id", "discussion_comment_votes", ["user_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_discussion_votes_user_id", table_name="discussion_comment_votes")
    op.drop_table("discussion_comment_votes")

    op.drop_index(
        "idx_discussion_comments_created_at", table_name="discussion_comments"
    )
    op.drop_index("idx_discussion_comments_author", table_name="discussion_comments")
    op.drop_index(
        "idx_discussion_comments_parent_id", table_name="discussion_comments"
    )
    op.drop_index(
        "idx_discussion_comments_thread_parent", table_name="discussion_comments"
    )
    op.drop_table("discussion_comments")

    op.drop_table("discussion_threads")
