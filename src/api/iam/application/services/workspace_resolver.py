"""Workspace resolution for IAM bounded context.

Maps an authenticated credential (a session's tenant or a root key's
workspace) onto the unique active workspace the request operates on.
"""

from __future__ import annotations

from iam.application.observability import (
    DefaultWorkspaceResolverProbe,
    WorkspaceResolverProbe,
)
from iam.domain.aggregates import Workspace
from iam.domain.value_objects import PermissionId, TenantId, WorkspaceId
from iam.ports.exceptions import WorkspaceNotFoundError
from iam.ports.repositories import IWorkspaceRepository


class WorkspaceResolver:
    """Resolves credentials to active workspaces.

    Does not manage transactions; callers run it inside their own.
    """

    def __init__(
        self,
        workspace_repository: IWorkspaceRepository,
        probe: WorkspaceResolverProbe | None = None,
    ) -> None:
        self._workspace_repository = workspace_repository
        self._probe = probe or DefaultWorkspaceResolverProbe()

    async def resolve_for_tenant(
        self,
        tenant_id: TenantId,
        permission_id: PermissionId | None = None,
    ) -> Workspace:
        """Resolve the active workspace of a tenant.

        Args:
            tenant_id: Tenant from the caller's session
            permission_id: Optional permission to load in the same lookup

        Returns:
            The workspace; when permission_id is given its permissions are
            filtered to that id

        Raises:
            WorkspaceNotFoundError: If the tenant has no active workspace
        """
        workspace = await self._workspace_repository.get_active_by_tenant(
            tenant_id, permission_id=permission_id
        )
        if workspace is None:
            self._probe.workspace_not_found(lookup="tenant", key=tenant_id.value)
            raise WorkspaceNotFoundError(
                f"No active workspace for tenant {tenant_id.value}"
            )

        self._probe.workspace_resolved(workspace.id.value, lookup="tenant")
        return workspace

    async def resolve_by_id(self, workspace_id: WorkspaceId) -> Workspace:
        """Resolve an active workspace by id.

        Raises:
            WorkspaceNotFoundError: If the workspace is missing or soft-deleted
        """
        workspace = await self._workspace_repository.get_active_by_id(workspace_id)
        if workspace is None:
            self._probe.workspace_not_found(lookup="id", key=workspace_id.value)
            raise WorkspaceNotFoundError(f"Workspace {workspace_id.value} not found")

        self._probe.workspace_resolved(workspace.id.value, lookup="id")
        return workspace
