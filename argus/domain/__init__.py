"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from argus.domain.exceptions import (
    DomainError,
    DomainValidationError,
    ErrorKind,
    InvalidEnumValueError,
    InvalidMetadataError,
    InvalidStatusError,
    InvalidTimestampError,
    InvalidTraceIdError,
    MissingFieldError,
    is_validation_error,
)
from argus.domain.models import AuditLog, AuditStatus
from argus.domain.schemas import (
    AuditLogListResponse,
    AuditLogResponse,
    CreateAuditLogRequest,
    TraceAuditLogsResponse,
)
from argus.domain.validators import validate_create_audit_log_request

__all__ = [
    "AuditLog",
    "AuditLogListResponse",
    "AuditLogResponse",
    "AuditStatus",
    "CreateAuditLogRequest",
    "DomainError",
    "DomainValidationError",
    "ErrorKind",
    "InvalidEnumValueError",
    "InvalidMetadataError",
    "InvalidStatusError",
    "InvalidTimestampError",
    "InvalidTraceIdError",
    "MissingFieldError",
    "TraceAuditLogsResponse",
    "is_validation_error",
    "validate_create_audit_log_request",
]
