"""Audit log ingestor dependency injection.

Provides the configured AuditLogIngestor for FastAPI endpoints and for the
outbox worker started in the application lifespan.
"""

from __future__ import annotations

from infrastructure.audit import HttpAuditLogIngestor, LoggingAuditLogIngestor
from infrastructure.settings import get_audit_settings
from shared_kernel.audit import AuditLogIngestor


def get_audit_log_ingestor() -> AuditLogIngestor:
    """Get the audit log ingestor for the current configuration.

    Returns an HTTP ingestor when LATCHKEY_AUDIT_INGEST_URL is set, otherwise
    an ingestor that only writes entries to the application log.
    """
    settings = get_audit_settings()
    if settings.ingest_url is None:
        return LoggingAuditLogIngestor()

    return HttpAuditLogIngestor(
        ingest_url=settings.ingest_url,
        token=(
            settings.ingest_token.get_secret_value()
            if settings.ingest_token is not None
            else None
        ),
        timeout_seconds=settings.timeout_seconds,
    )
