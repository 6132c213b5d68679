"""Domain probe for outbox delivery.

The worker reports each delivery attempt through this probe; what counts
as an event here is an entry reaching (or failing to reach) its handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol
from uuid import UUID

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class OutboxWorkerProbe(Protocol):
    """Domain probe for outbox delivery."""

    def worker_started(self, poll_interval_seconds: int, batch_size: int) -> None:
        """Record that the poll loop was scheduled."""
        ...

    def worker_stopped(self) -> None:
        """Record that the poll loop was shut down."""
        ...

    def entry_delivered(self, entry_id: UUID, event_type: str) -> None:
        """Record that the handler accepted an entry."""
        ...

    def delivery_failed(self, entry_id: UUID, error: str, retry_count: int) -> None:
        """Record a failed attempt that will be retried."""
        ...

    def entry_dead_lettered(self, entry_id: UUID, event_type: str, error: str) -> None:
        """Record that an entry ran out of attempts."""
        ...

    def batch_delivered(self, count: int) -> None:
        """Record that a locked batch was committed."""
        ...

    def poll_failed(self, error: str) -> None:
        """Record that a poll could not fetch or commit its batch."""
        ...

    def with_context(self, context: ObservationContext) -> OutboxWorkerProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultOutboxWorkerProbe:
    """Default implementation of OutboxWorkerProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger().bind(component="outbox_worker")
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultOutboxWorkerProbe:
        return DefaultOutboxWorkerProbe(logger=self._logger, context=context)

    def worker_started(self, poll_interval_seconds: int, batch_size: int) -> None:
        self._logger.info(
            "outbox_worker_started",
            poll_interval_seconds=poll_interval_seconds,
            batch_size=batch_size,
            **self._get_context_kwargs(),
        )

    def worker_stopped(self) -> None:
        self._logger.info("outbox_worker_stopped", **self._get_context_kwargs())

    def entry_delivered(self, entry_id: UUID, event_type: str) -> None:
        self._logger.info(
            "outbox_entry_delivered",
            entry_id=str(entry_id),
            event_type=event_type,
            **self._get_context_kwargs(),
        )

    def delivery_failed(self, entry_id: UUID, error: str, retry_count: int) -> None:
        self._logger.warning(
            "outbox_delivery_failed",
            entry_id=str(entry_id),
            error=error,
            retry_count=retry_count,
            **self._get_context_kwargs(),
        )

    def entry_dead_lettered(self, entry_id: UUID, event_type: str, error: str) -> None:
        self._logger.error(
            "outbox_entry_dead_lettered",
            entry_id=str(entry_id),
            event_type=event_type,
            error=error,
            **self._get_context_kwargs(),
        )

    def batch_delivered(self, count: int) -> None:
        self._logger.debug(
            "outbox_batch_delivered", count=count, **self._get_context_kwargs()
        )

    def poll_failed(self, error: str) -> None:
        self._logger.error(
            "outbox_poll_failed", error=error, **self._get_context_kwargs()
        )
