# Application layer: services that orchestrate domain and infrastructure.

from argus.application.audit_repository import AuditLogFilters, AuditLogRepository
from argus.application.audit_service import AuditService
from argus.application.exceptions import ApplicationError, RepositoryError

__all__ = [
    "ApplicationError",
    "AuditLogFilters",
    "AuditLogRepository",
    "AuditService",
    "RepositoryError",
]
