"""initial gallery comments schema

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 09:12:44.215310

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "photos",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("album_id", sa.String(64), nullable=True),
        sa.Column("url", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )

    op.create_table(
        "comments",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "photo_id",
            sa.String(64),
            sa.ForeignKey("photos.id", ondelete="CASCADE"),
            nullable=False,
        ),
        # Replies are removed by the application's cascade, not the database
        sa.Column(
            "parent_id", sa.String(64), sa.ForeignKey("comments.id"), nullable=True
        ),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )
    op.create_index(
        "idx_comments_photo_id_created_at", "comments", ["photo_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    op.create_table(
        "comment_reactions",
        sa.Column(
            "comment_id", sa.String(64), sa.ForeignKey("comments.id"), nullable=False
        ),
        sa.Column("emoji", sa.String(32), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint(
            "comment_id", "emoji", "user_id", name="pk_comment_reactions"
        ),
    )
    op.create_index(
        "idx_comment_reactions_comment_id", "comment_reactions", ["comment_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comment_reactions_comment_id", table_name="comment_reactions")
    op.drop_table("comment_reactions")
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_photo_id_created_at", table_name="comments")
    op.drop_table("comments")
    op.drop_table("photos")
