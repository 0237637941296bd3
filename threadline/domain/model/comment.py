"""Comment entities.

Comments are stored flat by the backend, each optionally pointing at a
parent comment. The reply tree is derived on the client every time the
comments are fetched.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from threadline.domain.model.common import DomainModel
from threadline.domain.value import CommentId, PostId


class CommentRecord(DomainModel):
    """Comment as stored by the backend.

    Immutable once created. The author's email is accepted on insert but is
    never part of a record handed back to readers.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - created_at: Set by the backend, drives ordering
    """

    id: CommentId
    post_id: PostId
    content: str = Field(min_length=1)
    created_at: datetime
    parent_id: Optional[CommentId] = None
    author_name: str = Field(min_length=1)
    author_website: Optional[str] = None
    is_privileged: bool = False  # Decided once, at creation time


@dataclass
class CommentNode:
    """Node in a comment reply tree.

    Wraps a record and its direct replies in ascending creation order.
    Nodes are only assembled by the tree builder and treated as read-only
    afterwards.
    """

    record: CommentRecord
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.record.id
