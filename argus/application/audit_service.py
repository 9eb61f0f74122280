"""Audit log application service. Orchestrates validation, identity assignment, and persistence."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, List, Optional, Tuple, TypeVar
from uuid import UUID, uuid4

from argus.application.audit_repository import AuditLogFilters, AuditLogRepository
from argus.config.enums import AuditEnums
from argus.domain.exceptions import (
    DomainValidationError,
    InvalidTraceIdError,
    MissingFieldError,
)
from argus.domain.models.audit_log import AuditLog
from argus.domain.schemas.audit_log import CreateAuditLogRequest
from argus.domain.validators.audit_log_validator import (
    FIELD_TRACE_ID,
    parse_trace_id,
    validate_create_audit_log_request,
)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditService:
    """
    Application-layer orchestration only. No HTTP, no direct infrastructure.
    Holds no mutable state: the enum registry is read-only and shared, the repository
    coordinates concurrent writes. Repository errors propagate unchanged.
    """

    def __init__(
        self,
        repository: AuditLogRepository,
        enums: AuditEnums,
        logger: Optional[logging.Logger] = None,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
        repository_timeout: Optional[float] = None,
    ) -> None:
        self._repository = repository
        self._enums = enums
        self._logger = logger or logging.getLogger(__name__)
        self._default_page_size = default_page_size
        self._max_page_size = max(max_page_size, default_page_size)
        self._repository_timeout = repository_timeout

    async def _call_repository(self, call: Awaitable[T]) -> T:
        # wait_for(timeout=None) waits indefinitely; cancellation propagates either way.
        return await asyncio.wait_for(call, timeout=self._repository_timeout)

    async def create_audit_log(self, request: CreateAuditLogRequest) -> AuditLog:
        """
        Validate the request, assign id and created_at, persist exactly once.
        Raises DomainValidationError before any repository call on invalid input.
        """
        try:
            validated = validate_create_audit_log_request(request, self._enums)
        except DomainValidationError as e:
            self._logger.info(
                "audit_log_rejected",
                extra={"field": e.field, "error": e.message},
            )
            raise

        record = AuditLog(
            id=uuid4(),
            timestamp=validated.timestamp,
            status=validated.status,
            actor_type=validated.actor_type,
            actor_id=validated.actor_id,
            target_type=validated.target_type,
            target_id=validated.target_id,
            event_type=validated.event_type,
            event_action=validated.event_action,
            trace_id=validated.trace_id,
            request_metadata=validated.request_metadata,
            response_metadata=validated.response_metadata,
            additional_metadata=validated.additional_metadata,
            created_at=_utcnow(),
        )

        persisted = await self._call_repository(self._repository.create(record))
        self._logger.info(
            "audit_log_created",
            extra={
                "audit_log_id": str(persisted.id),
                "audit_trace_id": str(persisted.trace_id) if persisted.trace_id else None,
                "event_type": persisted.event_type,
                "event_action": persisted.event_action,
                "status": persisted.status.value,
            },
        )
        return persisted

    def clamp_page(self, limit: Optional[int], offset: Optional[int]) -> Tuple[int, int]:
        if limit is None or limit <= 0:
            limit = self._default_page_size
        limit = min(limit, self._max_page_size)
        if offset is None or offset < 0:
            offset = 0
        return limit, offset

    async def get_audit_logs(
        self,
        trace_id: Optional[str] = None,
        event_type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = 0,
        **filters: Any,
    ) -> Tuple[List[AuditLog], int]:
        """
        Return one page (ascending by timestamp) and the total number of matches.
        Filter values are passed through without vocabulary checks; a malformed trace id
        filter matches nothing. Extra keyword filters map onto AuditLogFilters fields.
        """
        limit, offset = self.clamp_page(limit, offset)
        try:
            parsed_trace_id = parse_trace_id(trace_id)
        except InvalidTraceIdError:
            # No stored record can carry a malformed trace id.
            return [], 0
        query = AuditLogFilters(
            limit=limit,
            offset=offset,
            trace_id=parsed_trace_id,
            event_type=event_type or None,
            **{key: value for key, value in filters.items() if value not in (None, "")},
        )
        logs, total = await self._call_repository(self._repository.get_audit_logs(query))
        self._logger.debug(
            "audit_logs_queried",
            extra={"returned": len(logs), "total": total, "limit": limit, "offset": offset},
        )
        return logs, total

    async def get_audit_logs_by_trace_id(self, trace_id: str) -> List[AuditLog]:
        """Return all records of one trace ascending by timestamp. Unknown trace → empty list."""
        parsed: Optional[UUID] = parse_trace_id(trace_id)
        if parsed is None:
            raise MissingFieldError(FIELD_TRACE_ID)
        return await self._call_repository(
            self._repository.get_audit_logs_by_trace_id(parsed)
        )
