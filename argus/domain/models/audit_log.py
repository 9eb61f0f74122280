"""Domain model for audit logs. Pure business semantics. No ORM or infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID


class AuditStatus(str, Enum):
    """Outcome of the audited operation."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass(frozen=True)
class AuditLog:
    """
    Immutable audit record: actor acted on target, with status, at timestamp (UTC).
    Created once by AuditService; never updated or deleted.
    """

    id: UUID
    timestamp: datetime
    status: AuditStatus
    actor_type: str
    actor_id: str
    target_type: str
    created_at: datetime
    target_id: Optional[str] = None
    event_type: Optional[str] = None
    event_action: Optional[str] = None
    trace_id: Optional[UUID] = None
    request_metadata: Optional[Dict[str, Any]] = None
    response_metadata: Optional[Dict[str, Any]] = None
    additional_metadata: Optional[Dict[str, Any]] = None
