"""DB-backed audit log repository. Persists audit logs to the audit_logs table."""

from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from argus.application.audit_repository import AuditLogFilters
from argus.application.exceptions import RepositoryError
from argus.domain.models.audit_log import AuditLog, AuditStatus
from argus.infrastructure.database.models import AuditLogModel

_ORDERING = (
    AuditLogModel.timestamp.asc(),
    AuditLogModel.created_at.asc(),
    AuditLogModel.id.asc(),
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; every stored datetime is UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_orm(record: AuditLog) -> AuditLogModel:
    return AuditLogModel(
        id=record.id,
        timestamp=record.timestamp,
        trace_id=record.trace_id,
        event_type=record.event_type,
        event_action=record.event_action,
        status=record.status.value,
        actor_type=record.actor_type,
        actor_id=record.actor_id,
        target_type=record.target_type,
        target_id=record.target_id,
        request_metadata=record.request_metadata,
        response_metadata=record.response_metadata,
        additional_metadata=record.additional_metadata,
        created_at=record.created_at,
    )


def _to_domain(orm: AuditLogModel) -> AuditLog:
    return AuditLog(
        id=orm.id,
        timestamp=_as_utc(orm.timestamp),
        status=AuditStatus(orm.status),
        actor_type=orm.actor_type,
        actor_id=orm.actor_id,
        target_type=orm.target_type,
        target_id=orm.target_id,
        event_type=orm.event_type,
        event_action=orm.event_action,
        trace_id=orm.trace_id,
        request_metadata=orm.request_metadata,
        response_metadata=orm.response_metadata,
        additional_metadata=orm.additional_metadata,
        created_at=_as_utc(orm.created_at),
    )


def _apply_filters(stmt: Select, filters: AuditLogFilters) -> Select:
    exact = (
        (AuditLogModel.trace_id, filters.trace_id),
        (AuditLogModel.event_type, filters.event_type),
        (AuditLogModel.event_action, filters.event_action),
        (AuditLogModel.status, filters.status),
        (AuditLogModel.actor_type, filters.actor_type),
        (AuditLogModel.actor_id, filters.actor_id),
        (AuditLogModel.target_type, filters.target_type),
        (AuditLogModel.target_id, filters.target_id),
    )
    conditions = [column == value for column, value in exact if value is not None]
    if filters.start_time is not None:
        conditions.append(AuditLogModel.timestamp >= _as_utc(filters.start_time))
    if filters.end_time is not None:
        conditions.append(AuditLogModel.timestamp <= _as_utc(filters.end_time))
    return stmt.where(*conditions) if conditions else stmt


class DbAuditLogRepository:
    """Persists audit logs through SQLAlchemy async sessions. Implements AuditLogRepository protocol."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, record: AuditLog) -> AuditLog:
        """Insert in its own transaction; rolled back on error or cancellation."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add(_to_orm(record))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to create audit log {record.id}: {e}") from e
        return record

    async def get_audit_logs(self, filters: AuditLogFilters) -> Tuple[List[AuditLog], int]:
        """Return one page ascending by timestamp and the total count of matches."""
        base = _apply_filters(select(AuditLogModel), filters)
        count_stmt = select(func.count()).select_from(base.subquery())
        page_stmt = base.order_by(*_ORDERING).limit(filters.limit).offset(filters.offset)
        try:
            async with self._session_factory() as session:
                total = (await session.execute(count_stmt)).scalar_one()
                rows = (await session.execute(page_stmt)).scalars().all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query audit logs: {e}") from e
        return [_to_domain(row) for row in rows], total

    async def get_audit_logs_by_trace_id(self, trace_id: UUID) -> List[AuditLog]:
        stmt = select(AuditLogModel).where(AuditLogModel.trace_id == trace_id).order_by(*_ORDERING)
        try:
            async with self._session_factory() as session:
                rows = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query audit logs for trace {trace_id}: {e}") from e
        return [_to_domain(row) for row in rows]
