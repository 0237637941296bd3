"""In-memory comment repository for testing."""

from typing import Optional

from threadline.domain.model import CommentRecord
from threadline.domain.repository.comment import CommentRepository
from threadline.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, CommentRecord] = {}
        self._emails: dict[CommentId, str] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[CommentRecord]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[CommentRecord]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: CommentRecord, author_email: str) -> CommentRecord:
        """Insert a comment."""
        self._comments[comment.id] = comment
        self._emails[comment.id] = author_email
        return comment

    def email_for(self, comment_id: CommentId) -> Optional[str]:
        """Email a comment was submitted with."""
        return self._emails.get(comment_id)
