"""Domain probe for key directory queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class KeyDirectoryServiceProbe(Protocol):
    """Domain probe for key directory queries."""

    def key_list_retrieved(
        self, api_id: str, workspace_id: str, count: int, total: int
    ) -> None:
        """Record that a page of keys was listed."""
        ...

    def api_not_found(self, api_id: str, workspace_id: str) -> None:
        """Record that the requested Api is not visible to the workspace."""
        ...

    def page_size_clamped(self, requested: int, applied: int) -> None:
        """Record that a requested page size was capped."""
        ...

    def with_context(self, context: ObservationContext) -> KeyDirectoryServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultKeyDirectoryServiceProbe:
    """Default implementation of KeyDirectoryServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultKeyDirectoryServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultKeyDirectoryServiceProbe(logger=self._logger, context=context)

    def key_list_retrieved(
        self, api_id: str, workspace_id: str, count: int, total: int
    ) -> None:
        """Record that a page of keys was listed."""
        self._logger.info(
            "key_list_retrieved",
            api_id=api_id,
            api_workspace_id=workspace_id,
            count=count,
            total=total,
            **self._get_context_kwargs(),
        )

    def api_not_found(self, api_id: str, workspace_id: str) -> None:
        """Record that the requested Api is not visible to the workspace."""
        self._logger.info(
            "api_not_found",
            api_id=api_id,
            api_workspace_id=workspace_id,
            **self._get_context_kwargs(),
        )

    def page_size_clamped(self, requested: int, applied: int) -> None:
        """Record that a requested page size was capped."""
        self._logger.debug(
            "page_size_clamped",
            requested=requested,
            applied=applied,
            **self._get_context_kwargs(),
        )
