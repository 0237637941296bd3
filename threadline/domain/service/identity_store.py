"""Remembered visitor identity and posting cooldown marker."""

from typing import Optional

import logfire

from threadline.domain.model import Identity
from threadline.domain.repository import KeyValueStore

from .base import Service

AUTHOR_NAME_KEY = "comment_author_name"
AUTHOR_EMAIL_KEY = "comment_author_email"
AUTHOR_WEBSITE_KEY = "comment_author_website"
REMEMBER_KEY = "comment_save_info"
LAST_SUBMISSION_KEY = "last_comment_time"

IDENTITY_KEYS = (AUTHOR_NAME_KEY, AUTHOR_EMAIL_KEY, AUTHOR_WEBSITE_KEY, REMEMBER_KEY)


class IdentityStore(Service):
    """Loads and saves the visitor's identity on the device.

    The identity is only kept when the visitor opted in. The cooldown marker
    is kept regardless of that choice.
    """

    def __init__(self, store: KeyValueStore) -> None:
        """Initialize identity store.

        Args:
            store: Device-local key/value storage
        """
        self.store = store

    def load(self) -> Identity:
        """Load the remembered identity.

        Returns:
            The saved identity when the remember flag is set,
            otherwise an empty identity
        """
        if self.store.get(REMEMBER_KEY) != "true":
            return Identity()

        return Identity(
            name=self.store.get(AUTHOR_NAME_KEY) or "",
            email=self.store.get(AUTHOR_EMAIL_KEY) or "",
            website=self.store.get(AUTHOR_WEBSITE_KEY) or "",
            remember=True,
        )

    def save(self, identity: Identity) -> None:
        """Remember the identity on this device."""
        self.store.set(AUTHOR_NAME_KEY, identity.name)
        self.store.set(AUTHOR_EMAIL_KEY, identity.email)
        self.store.set(AUTHOR_WEBSITE_KEY, identity.website)
        self.store.set(REMEMBER_KEY, "true")

    def clear(self) -> None:
        """Forget any remembered identity, including the remember flag."""
        for key in IDENTITY_KEYS:
            self.store.remove(key)

    def persist(self, identity: Identity) -> None:
        """Apply the visitor's current remember choice.

        Opting out revokes an earlier opt-in rather than leaving the old
        values behind.
        """
        if identity.remember:
            self.save(identity)
        else:
            self.clear()
        logfire.info("Visitor identity persisted", remember=identity.remember)

    def load_cooldown_marker(self) -> Optional[int]:
        """Time of the last successful submission in ms, if any."""
        raw = self.store.get(LAST_SUBMISSION_KEY)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            logfire.warn("Ignoring malformed cooldown marker", value=raw)
            return None

    def mark_submitted(self, at_ms: int) -> None:
        """Record a successful submission."""
        self.store.set(LAST_SUBMISSION_KEY, str(at_ms))
