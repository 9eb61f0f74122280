# argus/infrastructure/database/models.py

import uuid

from sqlalchemy import JSON, Column, DateTime, Index, String, Uuid

from argus.infrastructure.database.session import Base


class AuditLogModel(Base):
    """ORM model for persisted audit logs. Rows are inserted once and never updated."""

    __tablename__ = "audit_logs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    trace_id = Column(Uuid(as_uuid=True), nullable=True, index=True)

    event_type = Column(String(100), nullable=True, index=True)
    event_action = Column(String(50), nullable=True)
    status = Column(String(20), nullable=False)

    actor_type = Column(String(50), nullable=False)
    actor_id = Column(String(255), nullable=False)
    target_type = Column(String(50), nullable=False)
    target_id = Column(String(255), nullable=True)

    request_metadata = Column(JSON, nullable=True)
    response_metadata = Column(JSON, nullable=True)
    additional_metadata = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_audit_logs_trace_id_timestamp", "trace_id", "timestamp"),
    )
