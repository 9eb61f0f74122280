"""Domain-specific exceptions. Pure domain layer. No infrastructure."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Discriminant for caller-visible error kinds."""

    VALIDATION = "validation"
    INTERNAL = "internal"


class DomainError(Exception):
    """Base for all domain-layer errors. Caused by caller input, never by infrastructure."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when an audit log request violates a validation rule. Names the offending field."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class MissingFieldError(DomainValidationError):
    """Raised when a required field is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} is required")


class InvalidTimestampError(DomainValidationError):
    """Raised when the timestamp is not an RFC 3339 date-time with offset."""


class InvalidEnumValueError(DomainValidationError):
    """Raised when a value is not in the registry's allowed set for its category."""

    def __init__(self, field: str, value: str) -> None:
        self.value = value
        super().__init__(field, f"invalid {field}: {value!r}")


class InvalidStatusError(DomainValidationError):
    """Raised when status is not one of the fixed audit statuses."""


class InvalidTraceIdError(DomainValidationError):
    """Raised when traceId is not a valid UUID."""


class InvalidMetadataError(DomainValidationError):
    """Raised when metadata is not JSON-serializable."""


def is_validation_error(exc: Optional[BaseException]) -> bool:
    """True if exc was caused by malformed or disallowed input."""
    return getattr(exc, "kind", None) is ErrorKind.VALIDATION
