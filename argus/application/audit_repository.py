"""Audit log repository protocol. Application layer depends on this; infrastructure implements it."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol, Tuple
from uuid import UUID

from argus.domain.models.audit_log import AuditLog


@dataclass(frozen=True)
class AuditLogFilters:
    """
    Query filters for paginated audit log reads. Limit and offset are already clamped by the service.
    None means "do not filter on this dimension". Time bounds are inclusive.
    """

    limit: int
    offset: int = 0
    trace_id: Optional[UUID] = None
    event_type: Optional[str] = None
    event_action: Optional[str] = None
    status: Optional[str] = None
    actor_type: Optional[str] = None
    actor_id: Optional[str] = None
    target_type: Optional[str] = None
    target_id: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class AuditLogRepository(Protocol):
    """Protocol for persisting and querying audit logs. Records are append-only."""

    async def create(self, record: AuditLog) -> AuditLog:
        """Persist record atomically and return it. Assigns nothing."""
        ...

    async def get_audit_logs(self, filters: AuditLogFilters) -> Tuple[List[AuditLog], int]:
        """Return the requested page ascending by timestamp and the total number of matches."""
        ...

    async def get_audit_logs_by_trace_id(self, trace_id: UUID) -> List[AuditLog]:
        """Return every record of the trace ascending by timestamp."""
        ...
