"""HTTP client for the external audit log store."""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from infrastructure.audit.observability import (
    AuditLogIngestorProbe,
    DefaultAuditLogIngestorProbe,
)
from shared_kernel.audit import AuditLogEntry, AuditLogIngestionError


class HttpAuditLogIngestor:
    """Posts audit log entries to the ingestion endpoint as a JSON array.

    Any transport error or non-2xx response is reported as
    AuditLogIngestionError; callers decide whether that fails the request.
    """

    def __init__(
        self,
        ingest_url: str,
        token: str | None = None,
        timeout_seconds: float = 5.0,
        probe: AuditLogIngestorProbe | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the ingestor.

        Args:
            ingest_url: Endpoint accepting a JSON array of entries
            token: Optional bearer token sent with every request
            timeout_seconds: Per-request timeout
            probe: Optional domain probe for observability
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._ingest_url = ingest_url
        self._token = token
        self._timeout = httpx.Timeout(timeout_seconds)
        self._probe = probe or DefaultAuditLogIngestorProbe()
        self._transport = transport

    async def ingest(self, entries: Sequence[AuditLogEntry]) -> None:
        """Deliver entries in a single request.

        Raises:
            AuditLogIngestionError: If the request fails or is rejected
        """
        if not entries:
            return

        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._ingest_url,
                    json=[entry.to_payload() for entry in entries],
                    headers=headers,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._probe.audit_log_ingestion_failed(
                count=len(entries),
                error=f"status {e.response.status_code}",
            )
            raise AuditLogIngestionError(
                f"Audit log store rejected entries with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            self._probe.audit_log_ingestion_failed(count=len(entries), error=str(e))
            raise AuditLogIngestionError(
                f"Failed to reach audit log store: {e}"
            ) from e

        self._probe.audit_logs_ingested(
            count=len(entries),
            events=[entry.event for entry in entries],
        )
