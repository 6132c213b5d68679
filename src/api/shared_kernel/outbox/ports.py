"""Protocols (ports) for the outbox pattern.

These protocols let bounded contexts append entries to the outbox and
register handlers that deliver them, without shared_kernel knowing about
any particular side effect.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from shared_kernel.outbox.value_objects import OutboxEntry


@runtime_checkable
class IOutboxRepository(Protocol):
    """Repository for outbox entry persistence.

    The repository shares the same database session as the calling service,
    so appends happen within the same transaction as the state change they
    accompany.
    """

    async def append(
        self,
        event_type: str,
        payload: dict[str, Any],
        occurred_at: datetime,
        aggregate_type: str,
        aggregate_id: str,
    ) -> None:
        """Append a pre-serialized event to the outbox within the current transaction.

        Args:
            event_type: Name of the event type (e.g., "AuditLogRecorded")
            payload: Pre-serialized event data as a dictionary
            occurred_at: When the event occurred
            aggregate_type: Type of aggregate (e.g., "permission")
            aggregate_id: Identifier of the aggregate
        """
        ...

    async def fetch_unprocessed(self, limit: int = 100) -> list["OutboxEntry"]:
        """Fetch unprocessed entries ordered by creation time.

        Args:
            limit: Maximum number of entries to fetch

        Returns:
            List of unprocessed OutboxEntry objects
        """
        ...

    async def mark_processed(self, entry_id: UUID) -> None:
        """Mark an entry as processed.

        Args:
            entry_id: The UUID of the entry to mark as processed
        """
        ...


@runtime_checkable
class OutboxEventHandler(Protocol):
    """Delivers outbox entries of the event types it supports.

    The outbox worker dispatches each entry to the handler. A handler that
    raises leaves the entry pending for retry.
    """

    def supported_event_types(self) -> frozenset[str]:
        """Return the event type names this handler delivers."""
        ...

    async def handle(self, event_type: str, payload: dict[str, Any]) -> None:
        """Deliver a single outbox entry.

        Args:
            event_type: The name of the event type
            payload: The serialized event data

        Raises:
            ValueError: If the event type is not supported
        """
        ...
