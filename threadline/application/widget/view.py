"""Comment section view models.

Renders the reply forest into plain view models a template or frontend can
display as-is.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from threadline.application.widget.state import CommentSectionState, LoadStatus
from threadline.domain.model import CommentNode
from threadline.domain.value import CommentId


class CommentViewItem(BaseModel):
    """One rendered comment and its rendered replies."""

    comment_id: str
    author_name: str
    author_url: str | None  # Author name links here when set
    is_privileged: bool  # Shows the owner badge
    content: str
    created_at: datetime
    display_date: str
    depth: int
    can_reply: bool
    reply_form_open: bool
    replies: list["CommentViewItem"]


class CommentSectionViewModel(BaseModel):
    """The whole comment section."""

    heading: str
    comments: list[CommentViewItem]
    status_message: str | None  # Loading, error or empty-list text
    error: str | None
    submit_label: str
    submit_disabled: bool


def format_comment_date(value: datetime) -> str:
    """Format a timestamp like ``January 5, 2025 at 03:04 PM``."""
    return f"{value:%B} {value.day}, {value.year} at {value:%I:%M %p}"


class CommentView:
    """Renders comment forests.

    The reply button is offered while a comment's depth (roots are 0) is
    below ``max_reply_depth``. Deeper comments that already exist are still
    rendered, they just cannot be replied to.
    """

    def __init__(self, max_reply_depth: int = 3) -> None:
        self.max_reply_depth = max_reply_depth

    def render(
        self,
        forest: list[CommentNode],
        replying_to: Optional[CommentId] = None,
    ) -> list[CommentViewItem]:
        """Render a forest, root order preserved."""
        return [self._render_node(node, 0, replying_to) for node in forest]

    def _render_node(
        self, node: CommentNode, depth: int, replying_to: Optional[CommentId]
    ) -> CommentViewItem:
        record = node.record
        can_reply = depth < self.max_reply_depth
        return CommentViewItem(
            comment_id=str(record.id),
            author_name=record.author_name,
            author_url=record.author_website or None,
            is_privileged=record.is_privileged,
            content=record.content,
            created_at=record.created_at,
            display_date=format_comment_date(record.created_at),
            depth=depth,
            can_reply=can_reply,
            reply_form_open=can_reply and replying_to == record.id,
            replies=[
                self._render_node(child, depth + 1, replying_to)
                for child in node.children
            ],
        )

    def render_section(self, state: CommentSectionState) -> CommentSectionViewModel:
        """Render the full comment section for the current state."""
        if state.status is LoadStatus.LOADING:
            status_message = "Loading comments..."
        elif state.status is LoadStatus.FAILED:
            status_message = state.error
        elif state.status is LoadStatus.LOADED and not state.forest:
            status_message = "No comments yet."
        else:
            status_message = None

        # A failed fetch replaces the list area
        comments = (
            []
            if state.status is LoadStatus.FAILED
            else self.render(state.forest, state.replying_to)
        )

        return CommentSectionViewModel(
            heading=f"{state.total} Comments",
            comments=comments,
            status_message=status_message,
            error=state.error if state.status is LoadStatus.FAILED else None,
            submit_label="Posting..." if state.submitting else "Post Comment",
            submit_disabled=state.submitting,
        )
