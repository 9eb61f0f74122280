"""Shared fixtures: test enum registry and create-request factory."""

from datetime import datetime, timezone
from typing import Any

import pytest

from argus.config.enums import AuditEnums, EnumCategory
from argus.domain.schemas.audit_log import CreateAuditLogRequest


@pytest.fixture
def enums() -> AuditEnums:
    """Registry used across tests; mirrors the shipped defaults."""
    return AuditEnums.from_values(
        {
            EnumCategory.EVENT_TYPES: ["MANAGEMENT_EVENT", "USER_MANAGEMENT", "DATA_FETCH"],
            EnumCategory.EVENT_ACTIONS: ["CREATE", "READ", "UPDATE", "DELETE"],
            EnumCategory.ACTOR_TYPES: ["SERVICE", "ADMIN", "MEMBER", "SYSTEM"],
            EnumCategory.TARGET_TYPES: ["SERVICE", "RESOURCE"],
        }
    )


def make_request(**overrides: Any) -> CreateAuditLogRequest:
    """Well-formed create request; keyword arguments replace individual fields."""
    fields: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "SUCCESS",
        "actor_type": "SERVICE",
        "actor_id": "service-a",
        "target_type": "SERVICE",
        "target_id": "service-b",
    }
    fields.update(overrides)
    return CreateAuditLogRequest(**fields)


@pytest.fixture
def request_factory():
    return make_request
