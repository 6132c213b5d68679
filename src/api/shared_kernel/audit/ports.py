"""Protocols (ports) for audit log delivery."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from shared_kernel.audit.value_objects import AuditLogEntry


@runtime_checkable
class AuditLogIngestor(Protocol):
    """Append-only sink for audit log entries.

    Implementations deliver entries to the external audit store. Delivery is
    all-or-nothing per call from the caller's point of view: either the call
    returns and every entry was accepted, or it raises.
    """

    async def ingest(self, entries: Sequence[AuditLogEntry]) -> None:
        """Deliver audit log entries.

        Args:
            entries: Entries to append, in order

        Raises:
            AuditLogIngestionError: If the entries could not be delivered
        """
        ...
