"""Domain probe for root key authentication."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RootKeyServiceProbe(Protocol):
    """Domain probe for root key verification."""

    def root_key_authenticated(self, root_key_id: str, workspace_id: str) -> None:
        """Record that a root key verified and was accepted."""
        ...

    def root_key_authentication_failed(self, reason: str) -> None:
        """Record that a presented root key was rejected.

        Args:
            reason: not_found, revoked or expired
        """
        ...

    def with_context(self, context: ObservationContext) -> RootKeyServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRootKeyServiceProbe:
    """Default implementation of RootKeyServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRootKeyServiceProbe:
        return DefaultRootKeyServiceProbe(logger=self._logger, context=context)

    def root_key_authenticated(self, root_key_id: str, workspace_id: str) -> None:
        self._logger.info(
            "root_key_authenticated",
            root_key_id=root_key_id,
            root_key_workspace_id=workspace_id,
            **self._get_context_kwargs(),
        )

    def root_key_authentication_failed(self, reason: str) -> None:
        self._logger.warning(
            "root_key_authentication_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )
