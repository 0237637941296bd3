"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from threadline.domain.model import CommentRecord
from threadline.domain.repository import CommentRepository
from threadline.domain.value import CommentId, PostId
from threadline.persistence.mappers import comment_to_dict, row_to_comment
from threadline.persistence.tables import comments_table

# Columns readers may see; author_email stays in the database
_PUBLIC_COLUMNS = [c for c in comments_table.c if c.name != "author_email"]


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[CommentRecord]:
        """Find a comment by ID."""
        stmt = select(*_PUBLIC_COLUMNS).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[CommentRecord]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(*_PUBLIC_COLUMNS)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: CommentRecord, author_email: str) -> CommentRecord:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment, author_email))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
