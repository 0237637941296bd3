"""Comment section: state, rendering and orchestration."""

from .controller import CommentController
from .factory import CommentWidgetFactory
from .notification import NotificationChannel
from .state import CommentSectionState, LoadStatus
from .view import (
    CommentSectionViewModel,
    CommentView,
    CommentViewItem,
    format_comment_date,
)

__all__ = [
    "CommentController",
    "CommentSectionState",
    "CommentSectionViewModel",
    "CommentView",
    "CommentViewItem",
    "CommentWidgetFactory",
    "LoadStatus",
    "NotificationChannel",
    "format_comment_date",
]
