"""Domain probes for APIs repository operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ApiRepositoryProbe(Protocol):
    """Domain probe for Api repository operations."""

    def api_retrieved(self, api_id: str) -> None:
        """Record that an Api was retrieved."""
        ...

    def api_not_found(self, api_id: str) -> None:
        """Record that no visible Api matched the lookup."""
        ...

    def with_context(self, context: ObservationContext) -> ApiRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class KeyRepositoryProbe(Protocol):
    """Domain probe for key repository operations."""

    def key_page_retrieved(
        self, key_auth_id: str, count: int, total: int, offset: int
    ) -> None:
        """Record that a page of keys was read."""
        ...

    def with_context(self, context: ObservationContext) -> KeyRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultApiRepositoryProbe:
    """Default implementation of ApiRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultApiRepositoryProbe:
        return DefaultApiRepositoryProbe(logger=self._logger, context=context)

    def api_retrieved(self, api_id: str) -> None:
        self._logger.debug(
            "api_retrieved",
            api_id=api_id,
            **self._get_context_kwargs(),
        )

    def api_not_found(self, api_id: str) -> None:
        self._logger.debug(
            "api_not_found",
            api_id=api_id,
            **self._get_context_kwargs(),
        )


class DefaultKeyRepositoryProbe:
    """Default implementation of KeyRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultKeyRepositoryProbe:
        return DefaultKeyRepositoryProbe(logger=self._logger, context=context)

    def key_page_retrieved(
        self, key_auth_id: str, count: int, total: int, offset: int
    ) -> None:
        self._logger.debug(
            "key_page_retrieved",
            key_auth_id=key_auth_id,
            count=count,
            total=total,
            offset=offset,
            **self._get_context_kwargs(),
        )
