"""Workspace aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass, field

from iam.domain.aggregates.permission import Permission
from iam.domain.value_objects import PermissionId, TenantId, WorkspaceId


@dataclass
class Workspace:
    """The tenant-scoped boundary that owns APIs, keys and permissions.

    Workspaces are provisioned elsewhere; this context only resolves them.
    A workspace loaded for a permission lookup carries only the permissions
    that matched the lookup, not its full permission set.
    """

    id: WorkspaceId
    tenant_id: TenantId
    name: str
    permissions: list[Permission] = field(default_factory=list)

    def find_permission(self, permission_id: PermissionId) -> Permission | None:
        """Return the loaded permission with the given id, if any."""
        for permission in self.permissions:
            if permission.id == permission_id:
                return permission
        return None
