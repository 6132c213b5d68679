"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Implementations live in iam.infrastructure.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from iam.domain.aggregates import Permission, RootKey, Workspace
from iam.domain.value_objects import PermissionId, TenantId, WorkspaceId


@runtime_checkable
class IWorkspaceRepository(Protocol):
    """Read-only repository for Workspace resolution.

    Soft-deleted workspaces are never returned.
    """

    async def get_active_by_tenant(
        self,
        tenant_id: TenantId,
        permission_id: PermissionId | None = None,
    ) -> Workspace | None:
        """Retrieve the active workspace of a tenant.

        When permission_id is given, the workspace's permissions are loaded
        in the same lookup, filtered to that id (so the returned workspace
        carries zero or one permission). Otherwise no permissions are loaded.

        Args:
            tenant_id: The tenant that owns the workspace
            permission_id: Optional permission to load alongside the workspace

        Returns:
            The Workspace aggregate, or None if not found or soft-deleted
        """
        ...

    async def get_active_by_id(self, workspace_id: WorkspaceId) -> Workspace | None:
        """Retrieve an active workspace by its ID.

        Args:
            workspace_id: The workspace to look up

        Returns:
            The Workspace aggregate (without permissions), or None if not
            found or soft-deleted
        """
        ...


@runtime_checkable
class IPermissionRepository(Protocol):
    """Repository for Permission aggregate persistence."""

    async def save(self, permission: Permission) -> None:
        """Persist name, description and updated_at of an existing permission.

        The write is scoped to the permission's workspace.

        Args:
            permission: The Permission aggregate to persist

        Raises:
            PermissionNotFoundError: If the permission no longer exists in
                its workspace
        """
        ...


@runtime_checkable
class IRootKeyRepository(Protocol):
    """Repository for RootKey verification and usage tracking."""

    async def get_verified_key(
        self,
        secret: str,
        extract_prefix_fn: Callable[[str], str],
        verify_hash_fn: Callable[[str, str], bool],
    ) -> RootKey | None:
        """Retrieve a root key by verifying its secret.

        Extracts the prefix from the secret, queries for all keys with that
        prefix, and verifies the hash for each candidate.

        Args:
            secret: The plaintext root key secret to verify
            extract_prefix_fn: Function to extract prefix from secret
            verify_hash_fn: Function to verify secret against hash

        Returns:
            The RootKey aggregate if the secret verifies, None otherwise
        """
        ...

    async def save(self, root_key: RootKey) -> None:
        """Persist usage tracking fields (last_used_at) of a root key."""
        ...
