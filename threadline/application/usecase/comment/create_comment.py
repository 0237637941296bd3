"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from threadline.domain.model import CommentRecord
from threadline.domain.service import CommentService
from threadline.domain.value import CommentId, PostId


class CommentItem(BaseModel):
    """Comment as returned to readers."""

    comment_id: str
    post_id: str
    content: str
    parent_id: str | None
    author_name: str
    author_website: str | None
    is_privileged: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: CommentRecord) -> "CommentItem":
        """Convert a domain comment to its response model."""
        return cls(
            comment_id=str(comment.id),
            post_id=comment.post_id,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_name=comment.author_name,
            author_website=comment.author_website,
            is_privileged=comment.is_privileged,
            created_at=comment.created_at,
        )

    def to_domain(self) -> CommentRecord:
        """Convert back to a domain comment."""
        return CommentRecord(
            id=CommentId(UUID(self.comment_id)),
            post_id=PostId(self.post_id),
            content=self.content,
            created_at=self.created_at,
            parent_id=CommentId(UUID(self.parent_id)) if self.parent_id else None,
            author_name=self.author_name,
            author_website=self.author_website,
            is_privileged=self.is_privileged,
        )


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str
    author_name: str
    author_email: str
    parent_id: str | None = None  # Parent comment ID for replies
    author_website: str | None = None


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the parent comment does not exist
            ValueError: If an ID is malformed or the parent belongs to another post
        """
        parent_comment_id = (
            CommentId(UUID(request.parent_id)) if request.parent_id else None
        )
        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            content=request.content,
            author_name=request.author_name,
            author_email=request.author_email,
            parent_id=parent_comment_id,
            author_website=request.author_website,
        )
        return CommentItem.from_domain(comment)
