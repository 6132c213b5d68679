"""Outbox repository implementation.

Persists pre-serialized events to the outbox table for later delivery.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.outbox.models import OutboxModel
from shared_kernel.outbox.ports import IOutboxRepository
from shared_kernel.outbox.value_objects import OutboxEntry


class OutboxRepository(IOutboxRepository):
    """SQLAlchemy implementation of the outbox repository.

    This repository shares the calling service's session, so appends land in
    the same transaction as the mutation. It only calls session.add() and
    session.execute(); the calling service owns the transaction boundary.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(
        self,
        event_type: str,
        payload: dict[str, Any],
        occurred_at: datetime,
        aggregate_type: str,
        aggregate_id: str,
    ) -> None:
        """Append an event to the outbox within the current transaction.

        Args:
            event_type: Name of the event type (e.g., "AuditLogRecorded")
            payload: JSON-serializable event data
            occurred_at: When the event occurred
            aggregate_type: Type of aggregate (e.g., "permission")
            aggregate_id: Identifier of the aggregate
        """
        model = OutboxModel(
            aggregate_type=aggregate_type,
            aggregate_id=aggregate_id,
            event_type=event_type,
            payload=payload,
            occurred_at=occurred_at,
            processed_at=None,
        )
        self._session.add(model)

    async def fetch_unprocessed(self, limit: int = 100) -> list[OutboxEntry]:
        """Fetch pending entries ordered by creation time.

        Uses FOR UPDATE SKIP LOCKED so concurrent workers never pick up the
        same entry.

        Args:
            limit: Maximum number of entries to fetch

        Returns:
            List of unprocessed OutboxEntry value objects
        """
        stmt = (
            select(OutboxModel)
            .where(OutboxModel.processed_at.is_(None))
            .where(OutboxModel.failed_at.is_(None))
            .order_by(OutboxModel.created_at)
            .limit(limit)
            .with_for_update(skip_locked=True)
        )

        result = await self._session.execute(stmt)
        return [model.to_value_object() for model in result.scalars().all()]

    async def mark_processed(self, entry_id: UUID) -> None:
        """Mark an entry as processed.

        Args:
            entry_id: The UUID of the entry to mark as processed
        """
        stmt = (
            update(OutboxModel)
            .where(OutboxModel.id == entry_id)
            .values(processed_at=datetime.now(UTC))
        )
        await self._session.execute(stmt)
