"""Domain probe for audit log delivery."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuditLogIngestorProbe(Protocol):
    """Domain probe for audit log ingestion."""

    def audit_logs_ingested(self, count: int, events: list[str]) -> None:
        """Record that entries were accepted by the audit store."""
        ...

    def audit_log_ingestion_failed(self, count: int, error: str) -> None:
        """Record that the audit store rejected or could not be reached."""
        ...

    def audit_log_recorded_locally(
        self, workspace_id: str, audit_event: str, payload: dict[str, Any]
    ) -> None:
        """Record an entry that was only written to the application log."""
        ...

    def with_context(self, context: ObservationContext) -> AuditLogIngestorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuditLogIngestorProbe:
    """Default implementation of AuditLogIngestorProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger().bind(component="audit_log")
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAuditLogIngestorProbe:
        return DefaultAuditLogIngestorProbe(logger=self._logger, context=context)

    def audit_logs_ingested(self, count: int, events: list[str]) -> None:
        self._logger.info(
            "audit_log_ingested",
            count=count,
            events=events,
            **self._get_context_kwargs(),
        )

    def audit_log_ingestion_failed(self, count: int, error: str) -> None:
        self._logger.error(
            "audit_log_ingestion_failed",
            count=count,
            error=error,
            **self._get_context_kwargs(),
        )

    def audit_log_recorded_locally(
        self, workspace_id: str, audit_event: str, payload: dict[str, Any]
    ) -> None:
        self._logger.info(
            "audit_log_recorded",
            audit_workspace_id=workspace_id,
            audit_event=audit_event,
            entry=payload,
            **self._get_context_kwargs(),
        )
