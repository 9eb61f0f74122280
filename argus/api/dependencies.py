"""Dependency wiring: enum registry, repository backend, AuditService."""

import logging
from typing import Optional, Tuple

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from argus.application.audit_repository import AuditLogRepository
from argus.application.audit_service import AuditService
from argus.config.enums import AuditEnums
from argus.config.settings import AppSettings
from argus.infrastructure.database.audit_log_repository_db import DbAuditLogRepository
from argus.infrastructure.database.session import (
    create_engine,
    create_session_factory,
    init_models,
)
from argus.infrastructure.memory.audit_log_repository_memory import InMemoryAuditLogRepository


async def build_repository(settings: AppSettings) -> Tuple[AuditLogRepository, Optional[AsyncEngine]]:
    """Repository for the configured backend. The engine, if any, must be disposed on shutdown."""
    if settings.storage_backend == "memory":
        return InMemoryAuditLogRepository(), None
    engine = create_engine(settings.database_url, echo=settings.debug)
    await init_models(engine)
    return DbAuditLogRepository(create_session_factory(engine)), engine


def build_audit_service(
    settings: AppSettings,
    enums: AuditEnums,
    repository: AuditLogRepository,
) -> AuditService:
    """Build AuditService with the shared registry, repository, and logger."""
    return AuditService(
        repository=repository,
        enums=enums,
        logger=logging.getLogger("argus.audit"),
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
        repository_timeout=settings.repository_timeout_seconds,
    )


def get_audit_service(request: Request) -> AuditService:
    """Return the AuditService built at startup (app.state, set by lifespan)."""
    return request.app.state.audit_service


def get_enums(request: Request) -> AuditEnums:
    """Return the enum registry loaded at startup (app.state, set by lifespan)."""
    return request.app.state.enums
