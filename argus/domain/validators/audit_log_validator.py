"""Validators for audit log requests. Pure functions, no infrastructure or DB access."""

import json
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from argus.config.enums import AuditEnums, EnumCategory
from argus.domain.exceptions import (
    InvalidEnumValueError,
    InvalidMetadataError,
    InvalidStatusError,
    InvalidTimestampError,
    InvalidTraceIdError,
    MissingFieldError,
)
from argus.domain.models.audit_log import AuditStatus
from argus.domain.schemas.audit_log import CreateAuditLogRequest

# Field names as they appear on the wire; used in error reports.
FIELD_TIMESTAMP = "timestamp"
FIELD_STATUS = "status"
FIELD_ACTOR_TYPE = "actorType"
FIELD_ACTOR_ID = "actorId"
FIELD_TARGET_TYPE = "targetType"
FIELD_EVENT_TYPE = "eventType"
FIELD_EVENT_ACTION = "eventAction"
FIELD_TRACE_ID = "traceId"

# RFC 3339 date-time; the offset is mandatory.
_RFC3339_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)

_UUID_HEX = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
# Hyphenated, braced, urn:uuid: and plain 32-hex forms.
_UUID_PATTERN = re.compile(
    rf"{_UUID_HEX}|\{{{_UUID_HEX}\}}|(?i:urn:uuid:){_UUID_HEX}|[0-9a-fA-F]{{32}}"
)


@dataclass(frozen=True)
class ValidatedAuditLog:
    """Normalized field values of a request that passed every rule."""

    timestamp: datetime
    status: AuditStatus
    actor_type: str
    actor_id: str
    target_type: str
    target_id: Optional[str]
    event_type: Optional[str]
    event_action: Optional[str]
    trace_id: Optional[UUID]
    request_metadata: Optional[Dict[str, Any]]
    response_metadata: Optional[Dict[str, Any]]
    additional_metadata: Optional[Dict[str, Any]]


def _none_if_empty(value: Optional[str]) -> Optional[str]:
    return value if value else None


def parse_timestamp(raw: Optional[str]) -> datetime:
    """Parse an RFC 3339 date-time with offset and convert it to UTC."""
    if not raw:
        raise MissingFieldError(FIELD_TIMESTAMP)
    match = _RFC3339_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidTimestampError(
            FIELD_TIMESTAMP, f"timestamp must be an RFC 3339 date-time with offset, got {raw!r}"
        )
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    # Sub-microsecond digits are truncated.
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    try:
        if offset == "Z":
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            tz = timezone(sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6])))
        parsed = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond,
            tzinfo=tz,
        )
    except ValueError as e:
        raise InvalidTimestampError(
            FIELD_TIMESTAMP, f"timestamp is not a valid date-time, got {raw!r}"
        ) from e
    return parsed.astimezone(timezone.utc)


def validate_required_enum(
    enums: AuditEnums, category: EnumCategory, field: str, value: Optional[str]
) -> str:
    """Required field that must also belong to the category's allowed set."""
    if not value:
        raise MissingFieldError(field)
    if not enums.is_valid(category, value):
        raise InvalidEnumValueError(field, value)
    return value


def validate_optional_enum(
    enums: AuditEnums, category: EnumCategory, field: str, value: Optional[str]
) -> Optional[str]:
    """Optional field: empty means not applicable; otherwise must be allowed."""
    if not enums.is_valid(category, value):
        raise InvalidEnumValueError(field, value)
    return _none_if_empty(value)


def validate_required(field: str, value: Optional[str]) -> str:
    if not value:
        raise MissingFieldError(field)
    return value


def validate_status(raw: Optional[str]) -> AuditStatus:
    if not raw:
        raise MissingFieldError(FIELD_STATUS)
    try:
        return AuditStatus(raw)
    except ValueError as e:
        allowed = ", ".join(s.value for s in AuditStatus)
        raise InvalidStatusError(
            FIELD_STATUS, f"status must be one of {allowed}, got {raw!r}"
        ) from e


def parse_trace_id(raw: Optional[str]) -> Optional[UUID]:
    """Empty trace id means no correlation; otherwise it must be a UUID."""
    if not raw:
        return None
    try:
        if _UUID_PATTERN.fullmatch(raw) is None:
            raise ValueError("not UUID-shaped")
        return UUID(raw)
    except ValueError as e:
        raise InvalidTraceIdError(
            FIELD_TRACE_ID, f"traceId must be a valid UUID, got {raw!r}"
        ) from e


def validate_metadata_json_serializable(
    field: str, metadata: Optional[Dict[str, Any]]
) -> Optional[Dict[str, Any]]:
    """Ensure metadata is JSON-serializable. Raises InvalidMetadataError if not."""
    if metadata is None:
        return None
    try:
        json.dumps(metadata)
    except (TypeError, ValueError) as e:
        raise InvalidMetadataError(field, f"{field} must be JSON-serializable") from e
    return metadata


def validate_create_audit_log_request(
    request: CreateAuditLogRequest, enums: AuditEnums
) -> ValidatedAuditLog:
    """
    Apply every rule in a fixed order; the first violation is raised.
    Order: timestamp, actorType, actorId, targetType, status, eventType, eventAction, traceId, metadata.
    """
    timestamp = parse_timestamp(request.timestamp)
    actor_type = validate_required_enum(
        enums, EnumCategory.ACTOR_TYPES, FIELD_ACTOR_TYPE, request.actor_type
    )
    actor_id = validate_required(FIELD_ACTOR_ID, request.actor_id)
    target_type = validate_required_enum(
        enums, EnumCategory.TARGET_TYPES, FIELD_TARGET_TYPE, request.target_type
    )
    status = validate_status(request.status)
    event_type = validate_optional_enum(
        enums, EnumCategory.EVENT_TYPES, FIELD_EVENT_TYPE, request.event_type
    )
    event_action = validate_optional_enum(
        enums, EnumCategory.EVENT_ACTIONS, FIELD_EVENT_ACTION, request.event_action
    )
    trace_id = parse_trace_id(request.trace_id)

    return ValidatedAuditLog(
        timestamp=timestamp,
        status=status,
        actor_type=actor_type,
        actor_id=actor_id,
        target_type=target_type,
        target_id=_none_if_empty(request.target_id),
        event_type=event_type,
        event_action=event_action,
        trace_id=trace_id,
        request_metadata=validate_metadata_json_serializable(
            "requestMetadata", request.request_metadata
        ),
        response_metadata=validate_metadata_json_serializable(
            "responseMetadata", request.response_metadata
        ),
        additional_metadata=validate_metadata_json_serializable(
            "additionalMetadata", request.additional_metadata
        ),
    )
