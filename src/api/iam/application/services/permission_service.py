"""Permission application service for IAM bounded context.

Orchestrates RBAC permission mutations together with the audit log entry
every mutation must leave behind.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultPermissionServiceProbe,
    PermissionServiceProbe,
)
from iam.application.services.workspace_resolver import WorkspaceResolver
from iam.application.value_objects import WorkspaceScope
from iam.domain.aggregates import Permission, Workspace
from iam.domain.value_objects import PermissionId
from iam.ports.exceptions import (
    AuditLogNotRecordedError,
    PermissionNotFoundError,
    PermissionUpdateFailedError,
)
from iam.ports.repositories import IPermissionRepository
from shared_kernel.audit import (
    AUDIT_LOG_RECORDED_EVENT,
    AuditActor,
    AuditDeliveryPolicy,
    AuditLogEntry,
    AuditLogIngestor,
    AuditResource,
)
from shared_kernel.outbox.ports import IOutboxRepository

PERMISSION_UPDATE_EVENT = "permission.update"


class PermissionService:
    """Application service for RBAC permission mutations.

    Lookup and write run in two separate transactions on the same session.
    The audit entry is delivered according to the configured
    AuditDeliveryPolicy:

    - STRICT: ingested after commit; failure raises AuditLogNotRecordedError
    - BEST_EFFORT: ingested after commit; failure is only logged
    - OUTBOX: appended to the outbox inside the write transaction
    """

    def __init__(
        self,
        session: AsyncSession,
        workspace_resolver: WorkspaceResolver,
        permission_repository: IPermissionRepository,
        audit_log_ingestor: AuditLogIngestor,
        outbox: IOutboxRepository,
        delivery_policy: AuditDeliveryPolicy = AuditDeliveryPolicy.STRICT,
        probe: PermissionServiceProbe | None = None,
    ) -> None:
        """Initialize PermissionService with dependencies.

        Args:
            session: Database session for transaction management
            workspace_resolver: Resolves the caller's workspace
            permission_repository: Repository for permission persistence
            audit_log_ingestor: Destination for audit entries
            outbox: Outbox sharing the session, used by the OUTBOX policy
            delivery_policy: How audit entries are delivered
            probe: Optional domain probe for observability
        """
        self._session = session
        self._workspace_resolver = workspace_resolver
        self._permission_repository = permission_repository
        self._audit_log_ingestor = audit_log_ingestor
        self._outbox = outbox
        self._delivery_policy = delivery_policy
        self._probe = probe or DefaultPermissionServiceProbe()

    async def update_permission(
        self,
        scope: WorkspaceScope,
        permission_id: PermissionId,
        name: str,
        description: str | None,
    ) -> Permission:
        """Rename a permission and replace its description.

        Args:
            scope: The caller's tenant, user and audit context
            permission_id: The permission to update
            name: New permission name
            description: New description, or None to clear it

        Returns:
            The updated Permission aggregate

        Raises:
            WorkspaceNotFoundError: If the tenant has no active workspace
            PermissionNotFoundError: If the workspace has no such permission
            PermissionUpdateFailedError: If the write failed (nothing audited)
            AuditLogNotRecordedError: If the write committed but the audit
                entry could not be stored (STRICT policy only)
        """
        async with self._session.begin():
            workspace = await self._workspace_resolver.resolve_for_tenant(
                scope.tenant_id, permission_id=permission_id
            )

        permission = workspace.find_permission(permission_id)
        if permission is None:
            self._probe.permission_not_found(
                permission_id=permission_id.value,
                tenant_id=scope.tenant_id.value,
            )
            raise PermissionNotFoundError(
                f"Permission {permission_id.value} not found"
            )

        permission.update(name=name, description=description)
        entry = self._build_audit_entry(workspace, permission, scope)

        try:
            async with self._session.begin():
                await self._permission_repository.save(permission)
                if self._delivery_policy is AuditDeliveryPolicy.OUTBOX:
                    await self._outbox.append(
                        event_type=AUDIT_LOG_RECORDED_EVENT,
                        payload=entry.to_payload(),
                        occurred_at=entry.time,
                        aggregate_type="permission",
                        aggregate_id=permission.id.value,
                    )
        except PermissionNotFoundError:
            # Deleted between lookup and write
            self._probe.permission_not_found(
                permission_id=permission_id.value,
                tenant_id=scope.tenant_id.value,
            )
            raise
        except Exception as e:
            self._probe.permission_update_failed(
                permission_id=permission_id.value,
                error=str(e),
            )
            raise PermissionUpdateFailedError(
                f"Failed to update permission {permission_id.value}"
            ) from e

        self._probe.permission_updated(
            permission_id=permission.id.value,
            workspace_id=workspace.id.value,
            user_id=scope.user_id.value,
        )

        await self._emit_audit_log(entry, permission)
        return permission

    def _build_audit_entry(
        self,
        workspace: Workspace,
        permission: Permission,
        scope: WorkspaceScope,
    ) -> AuditLogEntry:
        return AuditLogEntry(
            workspace_id=workspace.id.value,
            actor=AuditActor(type="user", id=scope.user_id.value),
            event=PERMISSION_UPDATE_EVENT,
            description=f"Update permission {permission.id.value}",
            resources=(AuditResource(type="permission", id=permission.id.value),),
            context=scope.audit,
            time=permission.updated_at,
        )

    async def _emit_audit_log(self, entry: AuditLogEntry, permission: Permission) -> None:
        """Deliver the audit entry of a committed mutation."""
        policy = self._delivery_policy.value

        if self._delivery_policy is AuditDeliveryPolicy.OUTBOX:
            # Already committed with the mutation; the outbox worker delivers it
            self._probe.audit_log_emitted(
                permission_id=permission.id.value,
                audit_event=entry.event,
                policy=policy,
            )
            return

        try:
            await self._audit_log_ingestor.ingest([entry])
        except Exception as e:
            self._probe.audit_log_emission_failed(
                permission_id=permission.id.value, error=str(e), policy=policy
            )
            if self._delivery_policy is AuditDeliveryPolicy.STRICT:
                raise AuditLogNotRecordedError(
                    f"Permission {permission.id.value} was updated but its "
                    "audit log entry was not recorded"
                ) from e
            return

        self._probe.audit_log_emitted(
            permission_id=permission.id.value,
            audit_event=entry.event,
            policy=policy,
        )
