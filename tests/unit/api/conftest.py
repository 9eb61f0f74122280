"""Fixtures for API unit tests: in-memory repository, AsyncClient over the ASGI app."""

import pytest
from httpx import ASGITransport, AsyncClient

from argus.api import dependencies
from argus.application.audit_service import AuditService
from argus.infrastructure.memory.audit_log_repository_memory import InMemoryAuditLogRepository
from argus.main import app


@pytest.fixture
def audit_service(enums):
    return AuditService(repository=InMemoryAuditLogRepository(), enums=enums)


@pytest.fixture
def app_with_overrides(audit_service, enums):
    """App with the audit service and registry overridden; lifespan does not run under ASGITransport."""
    app.dependency_overrides[dependencies.get_audit_service] = lambda: audit_service
    app.dependency_overrides[dependencies.get_enums] = lambda: enums
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def audit_body():
    return {
        "timestamp": "2024-05-01T12:00:00Z",
        "status": "SUCCESS",
        "actorType": "SERVICE",
        "actorId": "service-a",
        "targetType": "SERVICE",
        "targetId": "service-b",
    }
