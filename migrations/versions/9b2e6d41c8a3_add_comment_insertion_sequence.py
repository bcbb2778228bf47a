"""add comment insertion sequence

Revision ID: 9b2e6d41c8a3
Revises: 3f1c2a9d7b40
Create Date: 2026-10-20 10:03:17.482911

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "9b2e6d41c8a3"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "comments",
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
    )
    op.create_index(
        "idx_comments_created_at_seq", "comments", ["created_at", "seq"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_created_at_seq", table_name="comments")
    op.drop_column("comments", "seq")
