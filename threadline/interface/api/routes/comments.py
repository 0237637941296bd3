"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from threadline.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from threadline.domain.error import NotFoundError

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=1000)
    author_name: str = Field(min_length=1, max_length=255)
    author_email: str = Field(min_length=1, max_length=255)
    author_website: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Create a comment on a post or reply to another comment.

    No authentication: the owner badge is granted by comparing the submitted
    email with the configured privileged address.

    Args:
        post_id: Page key
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: If the parent is unknown or validation fails
    """
    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            content=request.content,
            author_name=request.author_name,
            author_email=request.author_email,
            parent_id=request.parent_id,
            author_website=request.author_website,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get all comments for a post, oldest first.

    Args:
        post_id: Page key
        get_comments_use_case: Get comments use case from DI

    Returns:
        Flat comment list ordered by ascending creation time
    """
    request = GetCommentsRequest(post_id=post_id)
    return await get_comments_use_case.execute(request)
