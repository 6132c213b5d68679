"""Domain probes for IAM repository operations.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events related to workspace, permission, and root key
persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class WorkspaceRepositoryProbe(Protocol):
    """Domain probe for workspace repository operations."""

    def workspace_retrieved(self, workspace_id: str, permission_count: int) -> None:
        """Record that an active workspace was retrieved."""
        ...

    def workspace_not_found(self, lookup: str, key: str) -> None:
        """Record that no active workspace matched the lookup."""
        ...

    def with_context(self, context: ObservationContext) -> WorkspaceRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class PermissionRepositoryProbe(Protocol):
    """Domain probe for permission repository operations."""

    def permission_saved(self, permission_id: str, workspace_id: str) -> None:
        """Record that a permission was successfully saved."""
        ...

    def permission_not_found(self, permission_id: str, workspace_id: str) -> None:
        """Record that the permission to save no longer exists."""
        ...

    def with_context(self, context: ObservationContext) -> PermissionRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class RootKeyRepositoryProbe(Protocol):
    """Domain probe for root key repository operations."""

    def root_key_verified(self, root_key_id: str) -> None:
        """Record that a root key secret matched a stored hash."""
        ...

    def root_key_not_verified(self, candidate_count: int) -> None:
        """Record that no candidate's hash matched the secret."""
        ...

    def root_key_saved(self, root_key_id: str) -> None:
        """Record that root key usage was persisted."""
        ...

    def with_context(self, context: ObservationContext) -> RootKeyRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultWorkspaceRepositoryProbe:
    """Default implementation of WorkspaceRepositoryProbe using structlog."""

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
    ) -> DefaultWorkspaceRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultWorkspaceRepositoryProbe(logger=self._logger, context=context)

    def workspace_retrieved(self, workspace_id: str, permission_count: int) -> None:
        """Record that an active workspace was retrieved."""
        self._logger.debug(
            "workspace_retrieved",
            repository_workspace_id=workspace_id,
            permission_count=permission_count,
            **self._get_context_kwargs(),
        )

    def workspace_not_found(self, lookup: str, key: str) -> None:
        """Record that no active workspace matched the lookup."""
        self._logger.debug(
            "workspace_not_found",
            lookup=lookup,
            key=key,
            **self._get_context_kwargs(),
        )


class DefaultPermissionRepositoryProbe:
    """Default implementation of PermissionRepositoryProbe using structlog."""

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
    ) -> DefaultPermissionRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultPermissionRepositoryProbe(logger=self._logger, context=context)

    def permission_saved(self, permission_id: str, workspace_id: str) -> None:
        """Record that a permission was successfully saved."""
        self._logger.info(
            "permission_saved",
            permission_id=permission_id,
            permission_workspace_id=workspace_id,
            **self._get_context_kwargs(),
        )

    def permission_not_found(self, permission_id: str, workspace_id: str) -> None:
        """Record that the permission to save no longer exists."""
        self._logger.warning(
            "permission_not_found_on_save",
            permission_id=permission_id,
            permission_workspace_id=workspace_id,
            **self._get_context_kwargs(),
        )


class DefaultRootKeyRepositoryProbe:
    """Default implementation of RootKeyRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRootKeyRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultRootKeyRepositoryProbe(logger=self._logger, context=context)

    def root_key_verified(self, root_key_id: str) -> None:
        """Record that a root key secret matched a stored hash."""
        self._logger.debug(
            "root_key_verified",
            root_key_id=root_key_id,
            **self._get_context_kwargs(),
        )

    def root_key_not_verified(self, candidate_count: int) -> None:
        """Record that no candidate's hash matched the secret."""
        self._logger.debug(
            "root_key_not_verified",
            candidate_count=candidate_count,
            **self._get_context_kwargs(),
        )

    def root_key_saved(self, root_key_id: str) -> None:
        """Record that root key usage was persisted."""
        self._logger.debug(
            "root_key_saved",
            root_key_id=root_key_id,
            **self._get_context_kwargs(),
        )
