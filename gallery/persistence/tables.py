"""SQLAlchemy table definitions for the gallery.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PHOTOS TABLE (owned by the catalog; comments only check existence)
# ============================================================================
photos_table = Table(
    "photos",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("album_id", String(64), nullable=True),
    Column("url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "photo_id", String(64), ForeignKey("photos.id", ondelete="CASCADE"), nullable=False
    ),
    # No ON DELETE CASCADE: thread removal is resolved by the application
    Column("parent_id", String(64), ForeignKey("comments.id"), nullable=True),
    Column("author", String(255), nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Insertion order; breaks created_at ties
    Column("seq", BigInteger, Identity(), nullable=False),
)

Index("idx_comments_photo_id_created_at", comments_table.c.photo_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_created_at_seq", comments_table.c.created_at, comments_table.c.seq)

# ============================================================================
# COMMENT REACTIONS TABLE
# ============================================================================
comment_reactions_table = Table(
    "comment_reactions",
    metadata,
    Column("comment_id", String(64), ForeignKey("comments.id"), nullable=False),
    Column("emoji", String(32), nullable=False),
    Column("user_id", String(64), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("comment_id", "emoji", "user_id", name="pk_comment_reactions"),
)

Index("idx_comment_reactions_comment_id", comment_reactions_table.c.comment_id)
