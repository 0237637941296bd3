"""Comment section state.

Everything the comment section shows is derived from one state object owned
by the controller. The state only changes through the transition methods
below, so it can be driven and inspected without any rendering.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from threadline.domain.model import CommentNode, Identity
from threadline.domain.value import CommentId, PostId


class LoadStatus(str, Enum):
    """Where the comment list is in its fetch cycle."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class CommentSectionState:
    """State of one page's comment section."""

    post_id: PostId
    forest: list[CommentNode] = field(default_factory=list)
    total: int = 0
    status: LoadStatus = LoadStatus.IDLE
    error: Optional[str] = None

    identity: Identity = field(default_factory=Identity)
    draft: str = ""
    reply_draft: str = ""
    replying_to: Optional[CommentId] = None

    # Covers the top-level form and every reply form
    submitting: bool = False

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    # Fetch cycle

    def fetch_started(self) -> None:
        self.status = LoadStatus.LOADING

    def fetch_succeeded(self, forest: list[CommentNode], total: int) -> None:
        self.forest = forest
        self.total = total
        self.status = LoadStatus.LOADED
        self.error = None

    def fetch_failed(self, error: str) -> None:
        self.status = LoadStatus.FAILED
        self.error = error

    # Submit cycle

    def submit_validated(self) -> None:
        self.submitting = True

    def submit_succeeded(self, parent_id: Optional[CommentId]) -> None:
        self.submitting = False
        if parent_id is None:
            self.draft = ""
        else:
            self.reply_draft = ""
            self.replying_to = None

    def submit_failed(self) -> None:
        self.submitting = False

    # Reply slot

    def toggle_reply(self, comment_id: CommentId) -> None:
        """Open the reply form under a comment, or close it if already open.

        Only one reply form is open at a time.
        """
        if self.replying_to == comment_id:
            self.replying_to = None
        else:
            self.replying_to = comment_id

    def close_reply(self) -> None:
        self.replying_to = None
