"""Submission validation for new comments."""

import math
from typing import NoReturn, Optional

import logfire

from threadline.config import CommentSettings
from threadline.domain.error import SubmissionRejectedError
from threadline.domain.model import CommentSubmission, Identity
from threadline.domain.service.comment_service import is_privileged_author
from threadline.domain.value import CommentId, PostId, RejectionReason
from threadline.util.clock import Clock, now_ms

from .base import Service


class SubmissionValidator(Service):
    """Checks a proposed comment before it is sent to the backend."""

    def __init__(self, settings: CommentSettings, clock: Clock = now_ms) -> None:
        """Initialize submission validator.

        Args:
            settings: Comment rules (length limit, cooldown, privileged email)
            clock: Source of the current time in milliseconds
        """
        self.settings = settings
        self.clock = clock

    def validate(
        self,
        post_id: PostId,
        content: str,
        identity: Identity,
        parent_id: Optional[CommentId] = None,
        cooldown_marker: Optional[int] = None,
    ) -> CommentSubmission:
        """Validate a proposed comment.

        Checks run in a fixed order and the first failure wins:
        1. Content must not be blank
        2. Trimmed content must fit the length limit
        3. The previous submission must be older than the cooldown window
        4. A display name is required
        5. An email is required (presence only, the format is not checked)

        Args:
            post_id: Page the comment belongs to
            content: Raw comment text as typed
            identity: Current name/email/website of the visitor
            parent_id: Comment being replied to (None for top-level)
            cooldown_marker: Time of the last successful submission, in ms

        Returns:
            The accepted submission, content trimmed

        Raises:
            SubmissionRejectedError: If any check fails
        """
        text = content.strip()
        if not text:
            self._reject(RejectionReason.EMPTY_CONTENT, "Please enter a comment")

        limit = self.settings.max_length
        if len(text) > limit:
            self._reject(
                RejectionReason.TOO_LONG,
                f"Comment is too long. Maximum {limit} characters allowed.",
                limit=limit,
            )

        if cooldown_marker is not None:
            elapsed = self.clock() - cooldown_marker
            if elapsed < self.settings.cooldown_ms:
                remaining = math.ceil((self.settings.cooldown_ms - elapsed) / 1000)
                self._reject(
                    RejectionReason.COOLDOWN_ACTIVE,
                    f"Please wait {remaining} seconds before posting another comment.",
                    remaining_seconds=remaining,
                )

        if not identity.name.strip():
            self._reject(RejectionReason.NAME_REQUIRED, "Please enter your name")
        if not identity.email.strip():
            self._reject(RejectionReason.EMAIL_REQUIRED, "Please enter your email")

        return CommentSubmission(
            post_id=post_id,
            content=text,
            parent_id=parent_id,
            author_name=identity.name,
            author_email=identity.email,
            author_website=identity.website or None,
            is_privileged=is_privileged_author(
                identity.email, self.settings.privileged_email
            ),
        )

    def _reject(
        self,
        reason: RejectionReason,
        message: str,
        limit: int | None = None,
        remaining_seconds: int | None = None,
    ) -> NoReturn:
        logfire.info(
            "Comment submission rejected",
            reason=reason.value,
            limit=limit,
            remaining_seconds=remaining_seconds,
        )
        raise SubmissionRejectedError(
            reason, message, limit=limit, remaining_seconds=remaining_seconds
        )
