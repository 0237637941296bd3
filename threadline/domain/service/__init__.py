"""Domain services."""

from .base import Service
from .comment_service import CommentService, is_privileged_author
from .comment_tree import build_comment_tree
from .identity_store import IdentityStore
from .submission_validator import SubmissionValidator

__all__ = [
    "CommentService",
    "IdentityStore",
    "Service",
    "SubmissionValidator",
    "build_comment_tree",
    "is_privileged_author",
]
