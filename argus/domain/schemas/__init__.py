"""Domain schemas. Request/response shapes."""

from argus.domain.schemas.audit_log import (
    AuditLogListResponse,
    AuditLogResponse,
    CreateAuditLogRequest,
    TraceAuditLogsResponse,
)

__all__ = [
    "AuditLogListResponse",
    "AuditLogResponse",
    "CreateAuditLogRequest",
    "TraceAuditLogsResponse",
]
