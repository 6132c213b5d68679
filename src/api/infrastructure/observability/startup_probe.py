"""Domain probe for application startup and shutdown events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application lifecycle operations."""

    def application_started(self, app_name: str, audit_policy: str) -> None:
        """Record that the application finished starting."""
        ...

    def outbox_worker_enabled(self, poll_interval_seconds: int) -> None:
        """Record that the audit outbox worker was started."""
        ...

    def audit_ingestion_not_configured(self) -> None:
        """Record that no ingest URL is set and entries will only be logged."""
        ...

    def application_stopped(self) -> None:
        """Record that the application finished shutting down."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        return DefaultStartupProbe(logger=self._logger, context=context)

    def application_started(self, app_name: str, audit_policy: str) -> None:
        self._logger.info(
            "application_started",
            app_name=app_name,
            audit_policy=audit_policy,
            **self._get_context_kwargs(),
        )

    def outbox_worker_enabled(self, poll_interval_seconds: int) -> None:
        self._logger.info(
            "audit_outbox_worker_enabled",
            poll_interval_seconds=poll_interval_seconds,
            **self._get_context_kwargs(),
        )

    def audit_ingestion_not_configured(self) -> None:
        self._logger.warning(
            "audit_ingestion_not_configured",
            **self._get_context_kwargs(),
        )

    def application_stopped(self) -> None:
        self._logger.info("application_stopped", **self._get_context_kwargs())
