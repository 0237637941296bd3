"""SQLAlchemy table definitions for Threadline.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (flat, threaded through parent_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", String(255), nullable=False),  # Page key of the host site
    Column("content", Text, nullable=False),
    # No foreign key: replies outlive a removed parent and are dropped from the tree
    Column("parent_id", UUID(as_uuid=True), nullable=True),
    Column("author_name", String(255), nullable=False),
    Column("author_email", String(255), nullable=False),  # Never returned to readers
    Column("author_website", Text, nullable=True),
    Column("is_privileged", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
