"""Unit tests for NotificationChannel."""

import asyncio

import pytest

from threadline.application.widget import NotificationChannel


class TestNotificationChannel:
    """Tests for the single-slot notification channel."""

    def test_starts_empty(self):
        channel = NotificationChannel()

        assert channel.message is None
        assert not channel.is_visible

    @pytest.mark.asyncio
    async def test_show_sets_message(self):
        """A shown message should be visible immediately."""
        channel = NotificationChannel(dismiss_after_ms=1000)

        channel.show("Please enter a comment")

        assert channel.message == "Please enter a comment"
        assert channel.is_visible

    @pytest.mark.asyncio
    async def test_message_clears_itself(self):
        """A message should disappear after the dismiss delay."""
        channel = NotificationChannel(dismiss_after_ms=20)

        channel.show("Saved")
        await asyncio.sleep(0.05)

        assert channel.message is None

    @pytest.mark.asyncio
    async def test_new_message_replaces_and_restarts_timer(self):
        """The earlier message's timer must not clear the newer message."""
        channel = NotificationChannel(dismiss_after_ms=60)

        channel.show("first")
        await asyncio.sleep(0.04)
        channel.show("second")
        await asyncio.sleep(0.04)

        # 80ms after "first" was shown, but only 40ms after "second"
        assert channel.message == "second"

        await asyncio.sleep(0.05)
        assert channel.message is None

    @pytest.mark.asyncio
    async def test_dismiss_clears_now(self):
        """Dismiss should clear without waiting for the timer."""
        channel = NotificationChannel(dismiss_after_ms=1000)
        channel.show("hello")

        channel.dismiss()

        assert channel.message is None
