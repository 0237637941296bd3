"""Comment backend interface.

The backend is whatever remote store holds the comments. The comment
section only needs to insert one comment and to list a page's comments.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from threadline.domain.model.comment import CommentRecord
from threadline.domain.value import CommentId, PostId


class CommentBackend(ABC):
    """Remote comment store as seen by the comment section.

    Implementations raise ``BackendError`` carrying the backend's own
    message when a call fails.
    """

    @abstractmethod
    async def insert_comment(
        self,
        post_id: PostId,
        content: str,
        author_name: str,
        author_email: str,
        parent_id: Optional[CommentId] = None,
        author_website: Optional[str] = None,
    ) -> CommentRecord:
        """Create one comment.

        The backend assigns the identifier and creation time and decides
        whether the author is privileged.

        Returns:
            The created comment
        """
        pass

    @abstractmethod
    async def query_comments(self, post_id: PostId) -> List[CommentRecord]:
        """List every comment of a page in one call.

        Returns:
            Comments ordered by ascending creation time
        """
        pass
