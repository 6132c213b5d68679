"""Audit log contract shared by bounded contexts that perform mutations."""

from shared_kernel.audit.exceptions import AuditLogIngestionError
from shared_kernel.audit.ports import AuditLogIngestor
from shared_kernel.audit.value_objects import (
    AuditActor,
    AuditContext,
    AuditDeliveryPolicy,
    AuditLogEntry,
    AuditResource,
)

# Outbox event type used when audit entries are delivered by the outbox worker
AUDIT_LOG_RECORDED_EVENT = "AuditLogRecorded"

__all__ = [
    "AUDIT_LOG_RECORDED_EVENT",
    "AuditActor",
    "AuditContext",
    "AuditDeliveryPolicy",
    "AuditLogEntry",
    "AuditLogIngestionError",
    "AuditLogIngestor",
    "AuditResource",
]
