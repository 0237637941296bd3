"""HTTP comment backend client.

Talks to the Threadline comment API (``/posts/{post_id}/comments``).
"""

from datetime import datetime
from typing import Any, Optional
from urllib.parse import quote
from uuid import UUID

import httpx
import logfire
from pydantic import BaseModel, ValidationError

from threadline.domain.error import BackendError
from threadline.domain.model import CommentRecord
from threadline.domain.repository import CommentBackend
from threadline.domain.value import CommentId, PostId


class CommentPayload(BaseModel):
    """Comment as serialized by the API."""

    comment_id: UUID
    post_id: str
    content: str
    parent_id: UUID | None = None
    author_name: str
    author_website: str | None = None
    is_privileged: bool = False
    created_at: datetime

    def to_domain(self) -> CommentRecord:
        return CommentRecord(
            id=CommentId(self.comment_id),
            post_id=PostId(self.post_id),
            content=self.content,
            created_at=self.created_at,
            parent_id=CommentId(self.parent_id) if self.parent_id else None,
            author_name=self.author_name,
            author_website=self.author_website,
            is_privileged=self.is_privileged,
        )


class CommentListPayload(BaseModel):
    """Comment list as serialized by the API."""

    post_id: str
    comments: list[CommentPayload]
    total: int


class HttpCommentBackend(CommentBackend):
    """CommentBackend reached over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize HTTP backend.

        Args:
            base_url: Root URL of the comment API
            timeout_seconds: Per-request timeout
            client: Preconfigured client to reuse (a new one is opened per
                request when omitted)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client

    async def insert_comment(
        self,
        post_id: PostId,
        content: str,
        author_name: str,
        author_email: str,
        parent_id: Optional[CommentId] = None,
        author_website: Optional[str] = None,
    ) -> CommentRecord:
        """Create one comment via ``POST /posts/{post_id}/comments``."""
        payload = {
            "content": content,
            "author_name": author_name,
            "author_email": author_email,
            "parent_id": str(parent_id) if parent_id else None,
            "author_website": author_website,
        }
        with logfire.span("http_backend.insert_comment", post_id=post_id):
            data = await self._request("POST", self._comments_path(post_id), json=payload)
            return self._parse(CommentPayload, data).to_domain()

    async def query_comments(self, post_id: PostId) -> list[CommentRecord]:
        """List comments via ``GET /posts/{post_id}/comments``."""
        with logfire.span("http_backend.query_comments", post_id=post_id):
            data = await self._request("GET", self._comments_path(post_id))
            listing = self._parse(CommentListPayload, data)
            return [item.to_domain() for item in listing.comments]

    def _comments_path(self, post_id: PostId) -> str:
        return f"/posts/{quote(post_id, safe='')}/comments"

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, f"{self.base_url}{path}", **kwargs
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    response = await client.request(
                        method, f"{self.base_url}{path}", **kwargs
                    )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            detail = _error_detail(e.response)
            logfire.warn(
                "Comment backend rejected request",
                method=method,
                path=path,
                status_code=e.response.status_code,
                detail=detail,
            )
            raise BackendError(detail) from e
        except httpx.HTTPError as e:
            logfire.warn(
                "Comment backend unreachable", method=method, path=path, error=str(e)
            )
            raise BackendError(str(e) or type(e).__name__) from e
        except ValueError as e:
            # Body was not JSON
            raise BackendError(f"Invalid response from comment backend: {e}") from e

    @staticmethod
    def _parse(model: type[BaseModel], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise BackendError(f"Invalid response from comment backend: {e}") from e


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and isinstance(body.get("detail"), str):
        return body["detail"]
    return f"HTTP {response.status_code}"
