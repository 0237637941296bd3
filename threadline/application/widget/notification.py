"""Single-slot toast notifications."""

import asyncio
from typing import Optional

import logfire


class NotificationChannel:
    """Holds at most one transient message for the visitor.

    A new message replaces the current one immediately. Every message clears
    itself after ``dismiss_after_ms`` unless it is replaced or dismissed
    first, in which case its pending clear is cancelled.

    Timers run on the asyncio loop that is running when ``show`` is called.
    """

    def __init__(self, dismiss_after_ms: int = 3000) -> None:
        self.dismiss_after_ms = dismiss_after_ms
        self._message: Optional[str] = None
        self._timer: Optional[asyncio.TimerHandle] = None
        # Bumped on every change so a clear that slipped past cancel() is ignored
        self._generation = 0

    @property
    def message(self) -> Optional[str]:
        """Message currently shown, if any."""
        return self._message

    @property
    def is_visible(self) -> bool:
        return self._message is not None

    def show(self, message: str) -> None:
        """Show a message, replacing whatever is shown now."""
        self._cancel_timer()
        self._generation += 1
        self._message = message
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(
            self.dismiss_after_ms / 1000, self._expire, self._generation
        )
        logfire.debug("Notification shown", message=message)

    def dismiss(self) -> None:
        """Clear the current message now."""
        self._cancel_timer()
        self._generation += 1
        self._message = None

    def _expire(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._timer = None
        self._message = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
