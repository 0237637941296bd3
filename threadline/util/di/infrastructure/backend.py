"""Comment backend infrastructure providers."""

from dishka import Scope, provide

from threadline.adapter.http.backend import HttpCommentBackend
from threadline.config import Settings
from threadline.domain.repository import CommentBackend
from threadline.util.di.base import ProviderBase
from threadline.util.observability import instrument_httpx


class BackendProvider(ProviderBase):
    """Comment backend component base."""

    __mock_component__ = "backend"


class ProdBackendProvider(BackendProvider):
    """Production backend provider talking to the comment API over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_backend(self, settings: Settings) -> CommentBackend:
        """Provide HTTP comment backend."""
        instrument_httpx()
        return HttpCommentBackend(
            base_url=settings.backend.base_url,
            timeout_seconds=settings.backend.timeout_seconds,
        )
