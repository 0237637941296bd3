"""Comment section controller.

Drives one page's comment section: loads the thread, validates and posts
new comments and replies, and keeps the visitor's identity and cooldown
marker up to date.
"""

from typing import Optional

import logfire

from threadline.application.widget.notification import NotificationChannel
from threadline.application.widget.state import CommentSectionState
from threadline.application.widget.view import CommentSectionViewModel, CommentView
from threadline.config import CommentSettings
from threadline.domain.error import BackendError, SubmissionRejectedError
from threadline.domain.model import CommentRecord, Identity
from threadline.domain.repository import CommentBackend
from threadline.domain.service import (
    IdentityStore,
    SubmissionValidator,
    build_comment_tree,
)
from threadline.domain.value import CommentId, PostId
from threadline.util.clock import Clock, now_ms
from threadline.util.error import StorageError

SUBMIT_FAILED_PREFIX = "Failed to add comment: "
STORAGE_FAILED_MESSAGE = (
    "Comment posted, but your details could not be saved on this device"
)


class CommentController:
    """Controller for a single page's comment section.

    There is no optimistic update: after every successful post the whole
    thread is fetched again, so a new comment shows up once the backend
    returns it.
    """

    def __init__(
        self,
        post_id: PostId,
        backend: CommentBackend,
        identity_store: IdentityStore,
        validator: SubmissionValidator,
        notifications: NotificationChannel,
        view: CommentView,
        settings: CommentSettings,
        clock: Clock = now_ms,
    ) -> None:
        """Initialize comment controller.

        Args:
            post_id: Page whose comments are shown
            backend: Remote comment store
            identity_store: Device-local identity and cooldown storage
            validator: Submission checks
            notifications: Toast channel for validation and submit errors
            view: Renderer for the section
            settings: Comment rules
            clock: Source of the current time in milliseconds
        """
        self.backend = backend
        self.identity_store = identity_store
        self.validator = validator
        self.notifications = notifications
        self.view = view
        self.settings = settings
        self.clock = clock
        self.state = CommentSectionState(post_id=post_id)
        self.mounted = False

    @property
    def post_id(self) -> PostId:
        return self.state.post_id

    async def mount(self) -> None:
        """Load the remembered identity, then the comments."""
        self.mounted = True
        try:
            self.state.identity = self.identity_store.load()
        except StorageError as e:
            logfire.warn(
                "Cannot load remembered identity", post_id=self.post_id, error=str(e)
            )
            self.state.identity = Identity()
        await self.refresh()

    def unmount(self) -> None:
        """Tear the section down.

        Backend calls still in flight complete, but their results are
        discarded.
        """
        self.mounted = False
        self.notifications.dismiss()

    async def refresh(self) -> None:
        """Fetch the page's comments and rebuild the reply tree.

        A failure is kept as an inline error in place of the list.
        """
        with logfire.span("comment_controller.refresh", post_id=self.post_id):
            self.state.fetch_started()
            try:
                records = await self.backend.query_comments(self.post_id)
            except BackendError as e:
                logfire.error(
                    "Error fetching comments", post_id=self.post_id, error=str(e)
                )
                if self.mounted:
                    self.state.fetch_failed(str(e))
                return

            if not self.mounted:
                return
            forest = build_comment_tree(
                records, include_orphans=self.settings.include_orphans
            )
            # The heading counts every fetched record, dropped orphans included
            self.state.fetch_succeeded(forest, total=len(records))

    def update_identity(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        website: Optional[str] = None,
        remember: Optional[bool] = None,
    ) -> None:
        """Change the identity fields of the form.

        Nothing is persisted until the next successful submission.
        """
        changes = {
            key: value
            for key, value in (
                ("name", name),
                ("email", email),
                ("website", website),
                ("remember", remember),
            )
            if value is not None
        }
        self.state.identity = self.state.identity.model_copy(update=changes)

    def set_draft(self, content: str) -> None:
        """Set the text of the top-level comment form."""
        self.state.draft = content

    def set_reply_draft(self, content: str) -> None:
        """Set the text of the open reply form."""
        self.state.reply_draft = content

    def toggle_reply(self, comment_id: CommentId) -> None:
        """Open or close the reply form under a comment."""
        self.state.toggle_reply(comment_id)

    def close_reply(self) -> None:
        """Close the reply form."""
        self.state.close_reply()

    async def submit(
        self, parent_id: Optional[CommentId] = None
    ) -> Optional[CommentRecord]:
        """Submit the top-level form, or the reply form when ``parent_id`` is set.

        Validation and backend failures are reported through the
        notification channel. A submission made while another one is in
        flight is ignored.

        Args:
            parent_id: Comment being replied to (None for top-level)

        Returns:
            The created comment, or None when nothing was posted
        """
        if self.state.submitting:
            logfire.info(
                "Ignoring submission while another is in flight", post_id=self.post_id
            )
            return None

        content = self.state.reply_draft if parent_id else self.state.draft
        identity = self.state.identity

        try:
            submission = self.validator.validate(
                post_id=self.post_id,
                content=content,
                identity=identity,
                parent_id=parent_id,
                cooldown_marker=self._load_cooldown_marker(),
            )
        except SubmissionRejectedError as e:
            self.notifications.show(e.message)
            return None

        self.state.submit_validated()
        with logfire.span(
            "comment_controller.submit",
            post_id=self.post_id,
            parent_id=str(parent_id) if parent_id else None,
        ):
            try:
                created = await self.backend.insert_comment(
                    post_id=submission.post_id,
                    content=submission.content,
                    author_name=submission.author_name,
                    author_email=submission.author_email,
                    parent_id=submission.parent_id,
                    author_website=submission.author_website,
                )
            except BackendError as e:
                logfire.error(
                    "Error adding comment", post_id=self.post_id, error=str(e)
                )
                if self.mounted:
                    self.state.submit_failed()
                    self.notifications.show(f"{SUBMIT_FAILED_PREFIX}{e}")
                return None

            # The device-local records are updated even if the section is gone
            stored = self._record_submission(identity)

            if not self.mounted:
                return created
            self.state.submit_succeeded(parent_id)
            if not stored:
                self.notifications.show(STORAGE_FAILED_MESSAGE)
            logfire.info(
                "Comment posted",
                post_id=self.post_id,
                comment_id=str(created.id),
                is_privileged=created.is_privileged,
            )

        await self.refresh()
        return created

    def _load_cooldown_marker(self) -> Optional[int]:
        try:
            return self.identity_store.load_cooldown_marker()
        except StorageError as e:
            logfire.warn(
                "Cannot read cooldown marker", post_id=self.post_id, error=str(e)
            )
            return None

    def _record_submission(self, identity: Identity) -> bool:
        """Persist the identity choice and the cooldown marker.

        Returns:
            False when device storage failed
        """
        try:
            self.identity_store.persist(identity)
            self.identity_store.mark_submitted(self.clock())
        except StorageError as e:
            logfire.error(
                "Cannot save visitor details", post_id=self.post_id, error=str(e)
            )
            return False
        return True

    def render(self) -> CommentSectionViewModel:
        """Render the current state."""
        return self.view.render_section(self.state)
