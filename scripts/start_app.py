#!/usr/bin/env python3
"""Serve the comment API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
failures while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from threadline.config import Settings
from threadline.util.logging import setup_logging
from threadline.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings, service_name="threadline-api")

    logfire.info(
        "Starting comment API", port=settings.api.port, git_sha=settings.git_sha
    )
    try:
        uvicorn.run(
            "threadline.interface.api.app:app",
            host="0.0.0.0",
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Comment API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Exit non-zero so the container restarts instead of idling
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
