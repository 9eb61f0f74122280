"""Pydantic schemas for the audit log API. Field rules live in the domain validator, not here."""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from argus.domain.models.audit_log import AuditStatus

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class CreateAuditLogRequest(BaseModel):
    """
    Raw create request. All fields are plain strings so the validator can
    apply its rules in a fixed order and report the first failing field.
    """

    model_config = _CAMEL_CONFIG

    timestamp: Optional[str] = None
    status: Optional[str] = None
    actor_type: Optional[str] = None
    actor_id: Optional[str] = None
    target_type: Optional[str] = None
    target_id: Optional[str] = None
    event_type: Optional[str] = None
    event_action: Optional[str] = None
    trace_id: Optional[str] = None
    request_metadata: Optional[Dict[str, Any]] = None
    response_metadata: Optional[Dict[str, Any]] = None
    additional_metadata: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class AuditLogResponse(BaseModel):
    """Response schema for a persisted audit log."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
    timestamp: datetime
    status: AuditStatus
    actor_type: str
    actor_id: str
    target_type: str
    target_id: Optional[str] = None
    event_type: Optional[str] = None
    event_action: Optional[str] = None
    trace_id: Optional[UUID] = None
    request_metadata: Optional[Dict[str, Any]] = None
    response_metadata: Optional[Dict[str, Any]] = None
    additional_metadata: Optional[Dict[str, Any]] = None
    created_at: datetime


class AuditLogListResponse(BaseModel):
    """One page of audit logs plus the total number of matches."""

    model_config = _CAMEL_CONFIG

    logs: List[AuditLogResponse]
    total: int
    limit: int
    offset: int


class TraceAuditLogsResponse(BaseModel):
    """All audit logs of one trace, ascending by timestamp."""

    model_config = _CAMEL_CONFIG

    trace_id: UUID
    logs: List[AuditLogResponse]
    count: int
