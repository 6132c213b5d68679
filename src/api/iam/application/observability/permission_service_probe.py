"""Protocol and default implementation for permission service observability.

Captures the outcome of every permission mutation, including the audit
delivery step that follows the database commit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PermissionServiceProbe(Protocol):
    """Domain probe for permission service operations."""

    def permission_updated(
        self,
        permission_id: str,
        workspace_id: str,
        user_id: str,
    ) -> None:
        """Record that a permission was renamed or re-described."""
        ...

    def permission_not_found(
        self,
        permission_id: str,
        tenant_id: str,
    ) -> None:
        """Record that the permission did not exist in the caller's workspace."""
        ...

    def permission_update_failed(
        self,
        permission_id: str,
        error: str,
    ) -> None:
        """Record that the storage write for a permission failed."""
        ...

    def audit_log_emitted(
        self,
        permission_id: str,
        audit_event: str,
        policy: str,
    ) -> None:
        """Record that the mutation's audit entry was ingested or queued."""
        ...

    def audit_log_emission_failed(
        self,
        permission_id: str,
        error: str,
        policy: str,
    ) -> None:
        """Record that the audit entry for a committed mutation was not stored."""
        ...

    def with_context(self, context: ObservationContext) -> PermissionServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPermissionServiceProbe:
    """Default implementation of PermissionServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultPermissionServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultPermissionServiceProbe(logger=self._logger, context=context)

    def permission_updated(
        self,
        permission_id: str,
        workspace_id: str,
        user_id: str,
    ) -> None:
        """Record that a permission was renamed or re-described."""
        self._logger.info(
            "permission_updated",
            permission_id=permission_id,
            permission_workspace_id=workspace_id,
            actor_user_id=user_id,
            **self._get_context_kwargs(),
        )

    def permission_not_found(
        self,
        permission_id: str,
        tenant_id: str,
    ) -> None:
        """Record that the permission did not exist in the caller's workspace."""
        self._logger.info(
            "permission_not_found",
            permission_id=permission_id,
            actor_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def permission_update_failed(
        self,
        permission_id: str,
        error: str,
    ) -> None:
        """Record that the storage write for a permission failed."""
        self._logger.error(
            "permission_update_failed",
            permission_id=permission_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def audit_log_emitted(
        self,
        permission_id: str,
        audit_event: str,
        policy: str,
    ) -> None:
        """Record that the mutation's audit entry was ingested or queued."""
        self._logger.info(
            "audit_log_emitted",
            permission_id=permission_id,
            audit_event=audit_event,
            policy=policy,
            **self._get_context_kwargs(),
        )

    def audit_log_emission_failed(
        self,
        permission_id: str,
        error: str,
        policy: str,
    ) -> None:
        """Record that the audit entry for a committed mutation was not stored."""
        self._logger.error(
            "audit_log_emission_failed",
            permission_id=permission_id,
            error=error,
            policy=policy,
            **self._get_context_kwargs(),
        )
