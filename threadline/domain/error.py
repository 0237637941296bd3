"""Domain layer errors."""

from threadline.domain.value.types import RejectionReason


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class SubmissionRejectedError(ValidationError):
    """Raised when a proposed comment fails a submission check.

    The message is meant to be shown to the visitor as-is.
    """

    def __init__(
        self,
        reason: RejectionReason,
        message: str,
        limit: int | None = None,
        remaining_seconds: int | None = None,
    ):
        self.reason = reason
        self.limit = limit
        self.remaining_seconds = remaining_seconds
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class BackendError(DomainError):
    """Raised when the comment backend fails or rejects a request."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
