"""Audit log ingestor that writes entries to the application log.

Used in development and whenever no ingestion endpoint is configured.
"""

from __future__ import annotations

from collections.abc import Sequence

from infrastructure.audit.observability import (
    AuditLogIngestorProbe,
    DefaultAuditLogIngestorProbe,
)
from shared_kernel.audit import AuditLogEntry


class LoggingAuditLogIngestor:
    """Writes every entry to the structured log; never fails."""

    def __init__(self, probe: AuditLogIngestorProbe | None = None) -> None:
        self._probe = probe or DefaultAuditLogIngestorProbe()

    async def ingest(self, entries: Sequence[AuditLogEntry]) -> None:
        for entry in entries:
            self._probe.audit_log_recorded_locally(
                workspace_id=entry.workspace_id,
                audit_event=entry.event,
                payload=entry.to_payload(),
            )
