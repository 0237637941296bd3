"""Get comments use case."""

from pydantic import BaseModel

from threadline.domain.service import CommentService
from threadline.domain.value import PostId

from .create_comment import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for listing every comment of a post, oldest first.

    The list is flat; readers assemble the reply tree themselves.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID

        Returns:
            Comments ordered by ascending creation time
        """
        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id)
        )
        items = [CommentItem.from_domain(comment) for comment in comments]
        return GetCommentsResponse(
            post_id=request.post_id, comments=items, total=len(items)
        )
