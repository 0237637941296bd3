"""Comment domain service."""

import logfire
from datetime import datetime, timezone
from uuid import uuid4

from threadline.config import CommentSettings
from threadline.domain.error import NotFoundError
from threadline.domain.model import CommentRecord
from threadline.domain.repository import CommentRepository
from threadline.domain.value import CommentId, PostId

from .base import Service


def is_privileged_author(email: str, privileged_email: str) -> bool:
    """Whether a comment should carry the owner badge.

    This is an exact, case-sensitive comparison of whatever email was
    submitted. Anyone who knows the address can claim the badge.
    """
    return email == privileged_email


class CommentService(Service):
    """Domain service for storing and listing comments."""

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Comment rules (privileged email)
        """
        self.comment_repository = comment_repository
        self.settings = settings

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        author_name: str,
        author_email: str,
        parent_id: CommentId | None = None,
        author_website: str | None = None,
    ) -> CommentRecord:
        """Create a comment on a post or a reply to another comment.

        Args:
            post_id: Post ID
            content: Comment text
            author_name: Display name of the author
            author_email: Author email, stored privately and used for the privileged check
            parent_id: Parent comment ID for replies (None for top-level)
            author_website: Optional author homepage

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment does not exist
            ValueError: If the parent comment belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=post_id,
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValueError("Parent comment does not belong to this post")

            comment = CommentRecord(
                id=CommentId(uuid4()),
                post_id=post_id,
                content=content,
                created_at=datetime.now(timezone.utc),
                parent_id=parent_id,
                author_name=author_name,
                author_website=author_website or None,
                is_privileged=is_privileged_author(
                    author_email, self.settings.privileged_email
                ),
            )

            saved = await self.comment_repository.save(comment, author_email)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=post_id,
                is_privileged=saved.is_privileged,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[CommentRecord]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            List of comments ordered by ascending creation time
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments
