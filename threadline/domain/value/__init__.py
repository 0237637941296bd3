"""Domain value objects for Threadline."""

from threadline.domain.value.identifiers import CommentId, PostId
from threadline.domain.value.types import RejectionReason

__all__ = [
    # Identifiers
    "CommentId",
    "PostId",
    # Types
    "RejectionReason",
]
