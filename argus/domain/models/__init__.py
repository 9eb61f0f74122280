"""Domain models. Pure business entities."""

from argus.domain.models.audit_log import AuditLog, AuditStatus

__all__ = [
    "AuditLog",
    "AuditStatus",
]
