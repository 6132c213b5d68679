"""Domain probe for workspace resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class WorkspaceResolverProbe(Protocol):
    """Domain probe for workspace resolution."""

    def workspace_resolved(self, workspace_id: str, lookup: str) -> None:
        """Record that a credential was resolved to an active workspace."""
        ...

    def workspace_not_found(self, lookup: str, key: str) -> None:
        """Record that no active workspace matched the lookup."""
        ...

    def with_context(self, context: ObservationContext) -> WorkspaceResolverProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultWorkspaceResolverProbe:
    """Default implementation of WorkspaceResolverProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultWorkspaceResolverProbe:
        return DefaultWorkspaceResolverProbe(logger=self._logger, context=context)

    def workspace_resolved(self, workspace_id: str, lookup: str) -> None:
        self._logger.debug(
            "workspace_resolved",
            resolved_workspace_id=workspace_id,
            lookup=lookup,
            **self._get_context_kwargs(),
        )

    def workspace_not_found(self, lookup: str, key: str) -> None:
        self._logger.info(
            "workspace_not_found",
            lookup=lookup,
            key=key,
            **self._get_context_kwargs(),
        )
