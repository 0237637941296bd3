"""Strongly typed identifiers for Threadline domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)

# Pages are addressed by whatever stable key the host site uses (usually a slug)
PostId = NewType("PostId", str)
