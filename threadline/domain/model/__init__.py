"""Domain model entities for Threadline."""

from threadline.domain.model.comment import CommentNode, CommentRecord
from threadline.domain.model.identity import Identity
from threadline.domain.model.submission import CommentSubmission

__all__ = [
    "CommentNode",
    "CommentRecord",
    "CommentSubmission",
    "Identity",
]
