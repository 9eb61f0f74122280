"""In-memory repository tests: trace correlation, ordering, pagination, filters."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from argus.application.audit_repository import AuditLogFilters
from argus.application.audit_service import AuditService
from argus.application.exceptions import RepositoryError
from argus.domain.models.audit_log import AuditLog, AuditStatus
from argus.infrastructure.memory.audit_log_repository_memory import InMemoryAuditLogRepository

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _log(seconds: int = 0, **overrides) -> AuditLog:
    fields = {
        "id": uuid4(),
        "timestamp": T0 + timedelta(seconds=seconds),
        "status": AuditStatus.SUCCESS,
        "actor_type": "SERVICE",
        "actor_id": "service-1",
        "target_type": "SERVICE",
        "target_id": "target-1",
        "created_at": datetime.now(timezone.utc),
    }
    fields.update(overrides)
    return AuditLog(**fields)


@pytest.fixture
def repository():
    return InMemoryAuditLogRepository()


async def test_trace_lookup_returns_only_that_trace_in_timestamp_order(repository):
    trace_id = uuid4()
    later = _log(1, trace_id=trace_id, actor_id="service-2")
    earlier = _log(0, trace_id=trace_id)
    await repository.create(later)
    await repository.create(earlier)
    await repository.create(_log(0, trace_id=uuid4()))
    await repository.create(_log(0))

    logs = await repository.get_audit_logs_by_trace_id(trace_id)

    assert logs == [earlier, later]


async def test_unknown_trace_returns_empty(repository):
    await repository.create(_log(trace_id=uuid4()))
    assert await repository.get_audit_logs_by_trace_id(uuid4()) == []


@pytest.mark.parametrize("limit, offset", [(2, 0), (2, 4), (10, 0), (3, 5), (1, 9)])
async def test_page_size_and_total(repository, limit, offset):
    n = 5
    for i in range(n):
        await repository.create(_log(i))

    logs, total = await repository.get_audit_logs(AuditLogFilters(limit=limit, offset=offset))

    assert total == n
    assert len(logs) == min(limit, max(0, n - offset))


async def test_pages_are_ascending_by_timestamp(repository):
    for i in reversed(range(5)):
        await repository.create(_log(i))

    logs, _ = await repository.get_audit_logs(AuditLogFilters(limit=2, offset=1))

    assert [log.timestamp for log in logs] == [T0 + timedelta(seconds=1), T0 + timedelta(seconds=2)]


async def test_filters_narrow_results_and_total(repository):
    trace_id = uuid4()
    await repository.create(_log(0, trace_id=trace_id, event_type="MANAGEMENT_EVENT"))
    await repository.create(_log(1, trace_id=trace_id, event_type="DATA_FETCH"))
    await repository.create(_log(2, event_type="MANAGEMENT_EVENT", status=AuditStatus.FAILURE))

    _, by_trace = await repository.get_audit_logs(AuditLogFilters(limit=10, trace_id=trace_id))
    _, by_type = await repository.get_audit_logs(
        AuditLogFilters(limit=10, event_type="MANAGEMENT_EVENT")
    )
    _, by_status = await repository.get_audit_logs(AuditLogFilters(limit=10, status="FAILURE"))
    logs, by_window = await repository.get_audit_logs(
        AuditLogFilters(
            limit=10,
            start_time=T0 + timedelta(seconds=1),
            end_time=T0 + timedelta(seconds=2),
        )
    )

    assert (by_trace, by_type, by_status, by_window) == (2, 2, 1, 2)
    assert all(log.timestamp >= T0 + timedelta(seconds=1) for log in logs)


async def test_duplicate_id_rejected(repository):
    record = _log()
    await repository.create(record)
    with pytest.raises(RepositoryError):
        await repository.create(record)


async def test_concurrent_creates_are_all_visible(repository):
    records = [_log(i) for i in range(20)]
    await asyncio.gather(*(repository.create(r) for r in records))

    _, total = await repository.get_audit_logs(AuditLogFilters(limit=1))

    assert total == 20


async def test_service_round_trip(repository, enums, request_factory):
    """Non-generated fields survive create then read."""
    service = AuditService(repository=repository, enums=enums)
    trace_id = str(uuid4())
    created = await service.create_audit_log(
        request_factory(trace_id=trace_id, event_type="DATA_FETCH", event_action="READ")
    )

    fetched = await service.get_audit_logs_by_trace_id(trace_id)

    assert fetched == [created]
    logs, total = await service.get_audit_logs(event_type="DATA_FETCH")
    assert total == 1
    assert logs[0].actor_id == created.actor_id
