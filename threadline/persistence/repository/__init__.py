"""PostgreSQL repository implementations."""

from threadline.persistence.repository.comment import PostgresCommentRepository

__all__ = [
    "PostgresCommentRepository",
]
