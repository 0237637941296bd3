"""In-process comment backend.

Serves the comment section straight from the comment use cases, without a
network hop. Useful when the comment API and the section run in the same
process, and in tests.
"""

from typing import Optional

from threadline.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from threadline.domain.error import BackendError, DomainError
from threadline.domain.model import CommentRecord
from threadline.domain.repository import CommentBackend
from threadline.domain.value import CommentId, PostId


class InProcessCommentBackend(CommentBackend):
    """CommentBackend backed by the local use cases."""

    def __init__(
        self,
        create_comment_use_case: CreateCommentUseCase,
        get_comments_use_case: GetCommentsUseCase,
    ) -> None:
        self.create_comment_use_case = create_comment_use_case
        self.get_comments_use_case = get_comments_use_case

    async def insert_comment(
        self,
        post_id: PostId,
        content: str,
        author_name: str,
        author_email: str,
        parent_id: Optional[CommentId] = None,
        author_website: Optional[str] = None,
    ) -> CommentRecord:
        """Create one comment."""
        request = CreateCommentRequest(
            post_id=post_id,
            content=content,
            author_name=author_name,
            author_email=author_email,
            parent_id=str(parent_id) if parent_id else None,
            author_website=author_website,
        )
        try:
            item = await self.create_comment_use_case.execute(request)
        except (DomainError, ValueError) as e:
            raise BackendError(str(e)) from e
        return item.to_domain()

    async def query_comments(self, post_id: PostId) -> list[CommentRecord]:
        """List every comment of a page, oldest first."""
        try:
            response = await self.get_comments_use_case.execute(
                GetCommentsRequest(post_id=post_id)
            )
        except (DomainError, ValueError) as e:
            raise BackendError(str(e)) from e
        return [item.to_domain() for item in response.comments]
