"""Application layer DI providers."""

from dishka import Scope, provide

from threadline.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from threadline.application.widget import CommentWidgetFactory
from threadline.config import Settings
from threadline.domain.repository import CommentBackend
from threadline.domain.service import CommentService, IdentityStore, SubmissionValidator
from threadline.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    # Comment section
    @provide(scope=Scope.APP)
    def get_comment_widget_factory(
        self,
        backend: CommentBackend,
        identity_store: IdentityStore,
        validator: SubmissionValidator,
        settings: Settings,
    ) -> CommentWidgetFactory:
        """Provide comment section factory."""
        return CommentWidgetFactory(
            backend=backend,
            identity_store=identity_store,
            validator=validator,
            settings=settings,
        )
