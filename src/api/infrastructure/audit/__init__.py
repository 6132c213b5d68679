"""Audit log delivery adapters."""

from infrastructure.audit.http_ingestor import HttpAuditLogIngestor
from infrastructure.audit.logging_ingestor import LoggingAuditLogIngestor
from infrastructure.audit.outbox_handler import AuditLogOutboxHandler

__all__ = [
    "AuditLogOutboxHandler",
    "HttpAuditLogIngestor",
    "LoggingAuditLogIngestor",
]
