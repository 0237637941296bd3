"""Repository interfaces for the Threadline domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence and adapter layers.
"""

from threadline.domain.repository.comment import CommentRepository
from threadline.domain.repository.comment_backend import CommentBackend
from threadline.domain.repository.key_value import KeyValueStore

__all__ = [
    "CommentBackend",
    "CommentRepository",
    "KeyValueStore",
]
