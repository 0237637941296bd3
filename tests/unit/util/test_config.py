"""Unit tests for Settings."""

import logging
from pathlib import Path

from threadline.config import Settings
from threadline.util.logging import log_level_for


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COMMENTS__PRIVILEGED_EMAIL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.comments.max_length == 1000
        assert settings.comments.cooldown_ms == 30_000
        assert settings.comments.max_reply_depth == 3
        assert settings.comments.include_orphans is False
        assert settings.notification.dismiss_after_ms == 3000
        assert settings.api.base_url == "http://localhost:8000"

    def test_nested_values_from_environment(self, monkeypatch):
        """Nested settings are read with the ``__`` delimiter."""
        monkeypatch.setenv("COMMENTS__PRIVILEGED_EMAIL", "me@example.com")
        monkeypatch.setenv("COMMENTS__INCLUDE_ORPHANS", "true")
        monkeypatch.setenv("STORAGE__PATH", "/tmp/visitor.json")

        settings = Settings(_env_file=None)

        assert settings.comments.privileged_email == "me@example.com"
        assert settings.comments.include_orphans is True
        assert settings.storage.path == Path("/tmp/visitor.json")

    def test_production_uses_https(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("API__HOST", "comments.example.com")

        settings = Settings(_env_file=None)

        assert settings.api.base_url == "https://comments.example.com"


class TestLogLevel:
    """Tests for the stdlib log level choice."""

    def test_levels(self):
        assert log_level_for(Settings(_env_file=None, debug=True)) == logging.DEBUG
        assert (
            log_level_for(Settings(_env_file=None, environment="production"))
            == logging.WARNING
        )
        assert (
            log_level_for(Settings(_env_file=None, environment="staging"))
            == logging.INFO
        )
