"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from threadline.domain.model import CommentRecord
from threadline.domain.value import CommentId, PostId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> CommentRecord:
    """Convert database row to CommentRecord domain model.

    Args:
        row: Database row as dict

    Returns:
        CommentRecord domain model
    """
    return CommentRecord(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(row["post_id"]),
        content=row["content"],
        created_at=row["created_at"],
        parent_id=CommentId(_as_uuid(row["parent_id"])) if row.get("parent_id") else None,
        author_name=row["author_name"],
        author_website=row.get("author_website"),
        is_privileged=row["is_privileged"],
    )


def comment_to_dict(comment: CommentRecord, author_email: str) -> Dict[str, Any]:
    """Convert CommentRecord domain model to database dict.

    Args:
        comment: CommentRecord domain model
        author_email: Submitted email, stored alongside but not part of the record

    Returns:
        Dict suitable for database insertion
    """
    return {**comment.model_dump(), "author_email": author_email}
