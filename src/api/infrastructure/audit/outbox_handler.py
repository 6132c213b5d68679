"""Outbox handler that delivers recorded audit log entries."""

from __future__ import annotations

from typing import Any

from shared_kernel.audit import (
    AUDIT_LOG_RECORDED_EVENT,
    AuditLogEntry,
    AuditLogIngestor,
)


class AuditLogOutboxHandler:
    """Turns AuditLogRecorded outbox entries back into ingestion calls.

    Ingestion errors propagate so the outbox worker can retry the entry.
    """

    def __init__(self, ingestor: AuditLogIngestor) -> None:
        self._ingestor = ingestor

    def supported_event_types(self) -> frozenset[str]:
        return frozenset({AUDIT_LOG_RECORDED_EVENT})

    async def handle(self, event_type: str, payload: dict[str, Any]) -> None:
        """Ingest the audit entry carried by an outbox payload.

        Raises:
            ValueError: If the event type is not supported or the payload is malformed
            AuditLogIngestionError: If the audit store rejects the entry
        """
        if event_type not in self.supported_event_types():
            raise ValueError(f"Unsupported outbox event type: {event_type}")

        entry = AuditLogEntry.from_payload(payload)
        await self._ingestor.ingest([entry])
