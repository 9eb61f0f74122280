"""In-memory audit log repository. Development and test backend; state lives for the process."""

import asyncio
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID

from argus.application.audit_repository import AuditLogFilters
from argus.application.exceptions import RepositoryError
from argus.domain.models.audit_log import AuditLog


def _sort_key(record: AuditLog) -> Tuple[datetime, datetime, UUID]:
    return (record.timestamp, record.created_at, record.id)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _matches(record: AuditLog, filters: AuditLogFilters) -> bool:
    exact = (
        (filters.trace_id, record.trace_id),
        (filters.event_type, record.event_type),
        (filters.event_action, record.event_action),
        (filters.status, record.status.value),
        (filters.actor_type, record.actor_type),
        (filters.actor_id, record.actor_id),
        (filters.target_type, record.target_type),
        (filters.target_id, record.target_id),
    )
    if any(wanted is not None and wanted != actual for wanted, actual in exact):
        return False
    start_time = _as_utc(filters.start_time)
    end_time = _as_utc(filters.end_time)
    if start_time is not None and record.timestamp < start_time:
        return False
    if end_time is not None and record.timestamp > end_time:
        return False
    return True


class InMemoryAuditLogRepository:
    """Append-only list of audit logs. Implements AuditLogRepository protocol."""

    def __init__(self) -> None:
        self._records: List[AuditLog] = []
        self._ids: set[UUID] = set()
        self._lock = asyncio.Lock()

    async def create(self, record: AuditLog) -> AuditLog:
        """Append record; duplicate ids are rejected like a primary key violation."""
        async with self._lock:
            if record.id in self._ids:
                raise RepositoryError(f"Audit log {record.id} already exists")
            self._ids.add(record.id)
            self._records.append(record)
        return record

    async def get_audit_logs(self, filters: AuditLogFilters) -> Tuple[List[AuditLog], int]:
        matching = sorted(
            (r for r in list(self._records) if _matches(r, filters)),
            key=_sort_key,
        )
        page = matching[filters.offset : filters.offset + filters.limit]
        return page, len(matching)

    async def get_audit_logs_by_trace_id(self, trace_id: UUID) -> List[AuditLog]:
        return sorted(
            (r for r in list(self._records) if r.trace_id == trace_id),
            key=_sort_key,
        )
