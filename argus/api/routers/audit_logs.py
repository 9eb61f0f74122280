"""Audit logs API router: POST /api/audit-logs, GET /api/audit-logs, GET /api/audit-logs/traces/{trace_id}."""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from argus.api.dependencies import get_audit_service
from argus.application.audit_service import AuditService
from argus.domain.schemas.audit_log import (
    AuditLogListResponse,
    AuditLogResponse,
    CreateAuditLogRequest,
    TraceAuditLogsResponse,
)

router = APIRouter()

Service = Annotated[AuditService, Depends(get_audit_service)]


@router.post("", response_model=AuditLogResponse, status_code=status.HTTP_201_CREATED)
async def create_audit_log(body: CreateAuditLogRequest, audit_service: Service):
    """Validate and persist one audit log. Validation errors are mapped to 400 by the app."""
    log = await audit_service.create_audit_log(body)
    return AuditLogResponse.model_validate(log)


@router.get("", response_model=AuditLogListResponse)
async def list_audit_logs(
    audit_service: Service,
    trace_id: Annotated[Optional[str], Query(alias="traceId")] = None,
    event_type: Annotated[Optional[str], Query(alias="eventType")] = None,
    event_action: Annotated[Optional[str], Query(alias="eventAction")] = None,
    log_status: Annotated[Optional[str], Query(alias="status")] = None,
    actor_type: Annotated[Optional[str], Query(alias="actorType")] = None,
    actor_id: Annotated[Optional[str], Query(alias="actorId")] = None,
    target_type: Annotated[Optional[str], Query(alias="targetType")] = None,
    target_id: Annotated[Optional[str], Query(alias="targetId")] = None,
    start_time: Annotated[Optional[datetime], Query(alias="startTime")] = None,
    end_time: Annotated[Optional[datetime], Query(alias="endTime")] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
):
    """Paginated list ascending by timestamp; limit and offset are clamped, not rejected."""
    logs, total = await audit_service.get_audit_logs(
        trace_id=trace_id,
        event_type=event_type,
        limit=limit,
        offset=offset,
        event_action=event_action,
        status=log_status,
        actor_type=actor_type,
        actor_id=actor_id,
        target_type=target_type,
        target_id=target_id,
        start_time=start_time,
        end_time=end_time,
    )
    effective_limit, effective_offset = audit_service.clamp_page(limit, offset)
    return AuditLogListResponse(
        logs=[AuditLogResponse.model_validate(log) for log in logs],
        total=total,
        limit=effective_limit,
        offset=effective_offset,
    )


@router.get("/traces/{trace_id}", response_model=TraceAuditLogsResponse)
async def get_trace(trace_id: str, audit_service: Service):
    """All audit logs of one trace, ascending by timestamp. Unknown trace → empty list."""
    logs = await audit_service.get_audit_logs_by_trace_id(trace_id)
    return TraceAuditLogsResponse(
        trace_id=UUID(trace_id),
        logs=[AuditLogResponse.model_validate(log) for log in logs],
        count=len(logs),
    )
