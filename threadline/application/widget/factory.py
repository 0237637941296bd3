"""Comment section factory."""

from threadline.application.widget.controller import CommentController
from threadline.application.widget.notification import NotificationChannel
from threadline.application.widget.view import CommentView
from threadline.config import Settings
from threadline.domain.repository import CommentBackend
from threadline.domain.service import IdentityStore, SubmissionValidator
from threadline.domain.value import PostId


class CommentWidgetFactory:
    """Builds comment section controllers sharing one backend and one
    identity store.

    Each controller gets its own notification channel.
    """

    def __init__(
        self,
        backend: CommentBackend,
        identity_store: IdentityStore,
        validator: SubmissionValidator,
        settings: Settings,
    ) -> None:
        self.backend = backend
        self.identity_store = identity_store
        self.validator = validator
        self.settings = settings

    def create(self, post_id: str) -> CommentController:
        """Create a controller for a page. Call ``mount()`` to load it."""
        return CommentController(
            post_id=PostId(post_id),
            backend=self.backend,
            identity_store=self.identity_store,
            validator=self.validator,
            notifications=NotificationChannel(
                dismiss_after_ms=self.settings.notification.dismiss_after_ms
            ),
            view=CommentView(max_reply_depth=self.settings.comments.max_reply_depth),
            settings=self.settings.comments,
            clock=self.validator.clock,
        )
