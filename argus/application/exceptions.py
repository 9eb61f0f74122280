"""Application-layer exceptions. Do not reuse domain exceptions."""

from argus.domain.exceptions import ErrorKind


class ApplicationError(Exception):
    """Base for all application-layer errors. Internal, never caused by caller input."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RepositoryError(ApplicationError):
    """Raised by repository implementations when the store fails (connectivity, constraints)."""
