"""Domain layer DI providers."""

from dishka import Scope, provide

from threadline.config import CommentSettings
from threadline.domain.repository import CommentRepository, KeyValueStore
from threadline.domain.service import CommentService, IdentityStore, SubmissionValidator
from threadline.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The comment service is REQUEST-scoped to align with the repository/session
    lifecycle. Services of the comment section live as long as the app.
    """

    @provide(scope=Scope.REQUEST)
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository, settings=settings)

    @provide(scope=Scope.APP)
    def get_submission_validator(self, settings: CommentSettings) -> SubmissionValidator:
        """Provide submission validator."""
        return SubmissionValidator(settings=settings)

    @provide(scope=Scope.APP)
    def get_identity_store(self, store: KeyValueStore) -> IdentityStore:
        """Provide visitor identity store."""
        return IdentityStore(store=store)
