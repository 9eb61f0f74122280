"""Health endpoint: storage backend and loaded vocabulary sizes."""

from httpx import AsyncClient

from argus.config.enums import AuditEnums
from argus.config.settings import get_settings


async def test_health_reports_backend_and_vocabulary(async_client: AsyncClient, enums: AuditEnums):
    r = await async_client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["storage_backend"] == get_settings().storage_backend
    assert body["vocabulary"] == {
        "eventTypes": len(enums.event_types),
        "eventActions": len(enums.event_actions),
        "actorTypes": len(enums.actor_types),
        "targetTypes": len(enums.target_types),
    }
