"""Logfire setup shared by the comment API and the comment section.

Code logs through logfire directly:

    logfire.info("Comment created", comment_id=str(comment.id), post_id=post_id)

    with logfire.span("comment_controller.refresh", post_id=post_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from threadline.config import Settings

SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    """Explicit flag first, otherwise send only when a token is configured."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings, service_name: str = "threadline") -> None:
    """Configure Logfire for this process.

    Call once at startup, before the app or any instrumentation is created.

    Args:
        settings: Application settings
        service_name: Name reported for this process (API, migrations, ...)
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=service_name,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        service_name=service_name,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the comment API."""
    logfire.instrument_fastapi(app)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries against the comments table."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls the comment section makes to the comment API."""
    logfire.instrument_httpx()
