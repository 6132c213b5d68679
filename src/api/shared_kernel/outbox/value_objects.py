"""Value objects for the outbox pattern."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class OutboxEntry:
    """Represents a single entry in the outbox table.

    Immutable snapshot of an outbox row as the worker read it.

    Attributes:
        id: Unique identifier for the entry (UUID)
        aggregate_type: Type of aggregate that produced the entry (e.g., "permission")
        aggregate_id: Identifier of the aggregate
        event_type: Name of the event type (e.g., "AuditLogRecorded")
        payload: Serialized event data as a dictionary
        occurred_at: When the event occurred
        processed_at: When the entry was delivered (None if pending)
        created_at: When the entry was written to the outbox
        retry_count: Number of failed delivery attempts
        last_error: The most recent delivery error (if any)
        failed_at: When the entry was moved to DLQ (None if not failed)
    """

    id: UUID
    aggregate_type: str
    aggregate_id: str
    event_type: str
    payload: dict[str, Any]
    occurred_at: datetime
    processed_at: datetime | None
    created_at: datetime
    retry_count: int = 0
    last_error: str | None = None
    failed_at: datetime | None = None

    @property
    def is_processed(self) -> bool:
        """Check if this entry has been delivered."""
        return self.processed_at is not None

    @property
    def is_failed(self) -> bool:
        """Check if this entry has been moved to the DLQ."""
        return self.failed_at is not None
