"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import logfire

from threadline.domain.model import CommentRecord
from threadline.domain.value import CommentId, PostId

# Console-only, nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 1, 5, 15, 4, tzinfo=timezone.utc)


def make_record(
    content: str = "Test comment",
    minutes: int = 0,
    parent: CommentRecord | None = None,
    post_id: str = "my-first-post",
    comment_id: UUID | None = None,
    author_name: str = "Alice",
    author_website: str | None = None,
    is_privileged: bool = False,
) -> CommentRecord:
    """Helper function to build comment records for tests.

    Args:
        content: Comment text
        minutes: Creation time as an offset from BASE_TIME
        parent: Comment this one replies to
        post_id: Page key
        comment_id: Fixed ID (random when omitted)
        author_name: Display name
        author_website: Author homepage
        is_privileged: Owner badge flag

    Returns:
        CommentRecord created ``minutes`` after BASE_TIME
    """
    return CommentRecord(
        id=CommentId(comment_id or uuid4()),
        post_id=PostId(post_id),
        content=content,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        parent_id=parent.id if parent else None,
        author_name=author_name,
        author_website=author_website,
        is_privileged=is_privileged,
    )


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms
