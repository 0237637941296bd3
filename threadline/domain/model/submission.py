"""Accepted comment submission."""

from typing import Optional

from threadline.domain.model.common import DomainModel
from threadline.domain.value import CommentId, PostId


class CommentSubmission(DomainModel):
    """A comment that passed validation and is ready to be inserted.

    ``content`` is already trimmed. Author fields are kept as typed.
    """

    post_id: PostId
    content: str
    parent_id: Optional[CommentId] = None
    author_name: str
    author_email: str
    author_website: Optional[str] = None
    is_privileged: bool = False
