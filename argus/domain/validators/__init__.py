"""Domain validators. Pure validation functions."""

from argus.domain.validators.audit_log_validator import (
    ValidatedAuditLog,
    parse_timestamp,
    parse_trace_id,
    validate_create_audit_log_request,
    validate_metadata_json_serializable,
    validate_optional_enum,
    validate_required,
    validate_required_enum,
    validate_status,
)

__all__ = [
    "ValidatedAuditLog",
    "parse_timestamp",
    "parse_trace_id",
    "validate_create_audit_log_request",
    "validate_metadata_json_serializable",
    "validate_optional_enum",
    "validate_required",
    "validate_required_enum",
    "validate_status",
]
