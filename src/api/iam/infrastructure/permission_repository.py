"""PostgreSQL implementation of IPermissionRepository."""

from __future__ import annotations

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Permission
from iam.infrastructure.models import PermissionModel
from iam.infrastructure.observability import (
    DefaultPermissionRepositoryProbe,
    PermissionRepositoryProbe,
)
from iam.ports.exceptions import PermissionNotFoundError
from iam.ports.repositories import IPermissionRepository


class PermissionRepository(IPermissionRepository):
    """Repository for Permission aggregate persistence to PostgreSQL.

    Only existing permissions are written; creation happens elsewhere.
    Every write is scoped to the permission's workspace.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: PermissionRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultPermissionRepositoryProbe()

    async def save(self, permission: Permission) -> None:
        """Persist name, description and updated_at of an existing permission.

        Args:
            permission: The Permission aggregate to persist

        Raises:
            PermissionNotFoundError: If the permission no longer exists in
                its workspace
        """
        stmt = select(PermissionModel).where(
            and_(
                PermissionModel.id == permission.id.value,
                PermissionModel.workspace_id == permission.workspace_id.value,
            )
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.permission_not_found(
                permission.id.value, permission.workspace_id.value
            )
            raise PermissionNotFoundError(
                f"Permission {permission.id.value} not found in workspace "
                f"{permission.workspace_id.value}"
            )

        model.name = permission.name
        model.description = permission.description
        model.updated_at = permission.updated_at

        # Flush to surface integrity errors inside the caller's transaction
        await self._session.flush()

        self._probe.permission_saved(
            permission.id.value, permission.workspace_id.value
        )
