"""Outbox worker that delivers pending outbox entries.

The worker runs as a background task within the FastAPI application and
polls the outbox table for entries that have not been delivered yet.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.outbox.models import OutboxModel
from infrastructure.outbox.repository import OutboxRepository
from shared_kernel.outbox.value_objects import OutboxEntry

if TYPE_CHECKING:
    from shared_kernel.outbox.observability import OutboxWorkerProbe
    from shared_kernel.outbox.ports import OutboxEventHandler


class OutboxWorker:
    """Background worker that dispatches outbox entries to a handler.

    Each poll opens a session, locks a batch of pending entries with
    FOR UPDATE SKIP LOCKED, hands each one to the handler and commits the
    outcome: processed on success, retry count bumped on failure, and
    dead-lettered (failed_at set) once max_retries is reached.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        handler: OutboxEventHandler,
        probe: OutboxWorkerProbe,
        poll_interval_seconds: int = 5,
        batch_size: int = 100,
        max_retries: int = 5,
    ) -> None:
        """Initialize the worker.

        Args:
            session_factory: Factory for creating database sessions
            handler: Delivers entries of the event types it supports
            probe: Observability probe for logging
            poll_interval_seconds: Delay between polls
            batch_size: Maximum entries to process per batch
            max_retries: Delivery attempts before an entry is dead-lettered
        """
        self._session_factory = session_factory
        self._handler = handler
        self._probe = probe
        self._poll_interval = poll_interval_seconds
        self._batch_size = batch_size
        self._max_retries = max_retries
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the poll loop as a background task."""
        self._running = True
        self._probe.worker_started(self._poll_interval, self._batch_size)
        self._task = asyncio.create_task(self._poll_loop())

    async def stop(self) -> None:
        """Stop the poll loop and wait for it to finish."""
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self._probe.worker_stopped()

    async def _poll_loop(self) -> None:
        while self._running:
            try:
                await self.process_batch()
            except Exception as e:
                # Entries stay pending and are picked up on the next poll
                self._probe.poll_failed(str(e))

            await asyncio.sleep(self._poll_interval)

    async def process_batch(self) -> int:
        """Fetch and deliver one batch of pending entries.

        Returns:
            Number of entries handled (delivered or failed)
        """
        async with self._session_factory() as session:
            repository = OutboxRepository(session=session)
            entries = await repository.fetch_unprocessed(limit=self._batch_size)

            if entries:
                await self._process_entries(entries, repository, session)
                await session.commit()
                self._probe.batch_delivered(len(entries))

            return len(entries)

    async def _process_entries(
        self,
        entries: list[OutboxEntry],
        repository: OutboxRepository,
        session: AsyncSession,
    ) -> None:
        for entry in entries:
            try:
                await self._handler.handle(entry.event_type, entry.payload)
            except Exception as e:
                await self._handle_processing_failure(entry, str(e), session)
                continue

            await repository.mark_processed(entry.id)
            self._probe.entry_delivered(entry.id, entry.event_type)

    async def _handle_processing_failure(
        self,
        entry: OutboxEntry,
        error: str,
        session: AsyncSession,
    ) -> None:
        """Record a failed delivery, dead-lettering it when exhausted.

        Args:
            entry: The outbox entry that failed
            error: The error message
            session: The database session
        """
        new_retry_count = entry.retry_count + 1

        if new_retry_count >= self._max_retries:
            await self._dead_letter(entry.id, new_retry_count, error, session)
            self._probe.entry_dead_lettered(entry.id, entry.event_type, error)
        else:
            await self._increment_retry(entry.id, new_retry_count, error, session)
            self._probe.delivery_failed(entry.id, error, new_retry_count)

    async def _dead_letter(
        self,
        entry_id: UUID,
        retry_count: int,
        error: str,
        session: AsyncSession,
    ) -> None:
        """Set failed_at so the entry is no longer picked up by polling."""
        stmt = (
            update(OutboxModel)
            .where(OutboxModel.id == entry_id)
            .values(
                retry_count=retry_count,
                last_error=error,
                failed_at=datetime.now(UTC),
            )
        )
        await session.execute(stmt)

    async def _increment_retry(
        self,
        entry_id: UUID,
        retry_count: int,
        error: str,
        session: AsyncSession,
    ) -> None:
        stmt = (
            update(OutboxModel)
            .where(OutboxModel.id == entry_id)
            .values(
                retry_count=retry_count,
                last_error=error,
            )
        )
        await session.execute(stmt)
