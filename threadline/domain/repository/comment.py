"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from threadline.domain.model.comment import CommentRecord
from threadline.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for stored comments.

    Defines the contract for comment persistence on the backend side.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[CommentRecord]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[CommentRecord]:
        """Find all comments for a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments ordered by ascending creation time
        """
        pass

    @abstractmethod
    async def save(self, comment: CommentRecord, author_email: str) -> CommentRecord:
        """Insert a comment.

        Args:
            comment: The comment to save
            author_email: Email the comment was submitted with

        Returns:
            The saved comment
        """
        pass
