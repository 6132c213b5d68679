"""PostgreSQL implementation of IWorkspaceRepository.

Workspaces are read-only in this service. Lookups only ever return
workspaces that have not been soft-deleted.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from iam.domain.aggregates import Permission, Workspace
from iam.domain.value_objects import PermissionId, TenantId, WorkspaceId
from iam.infrastructure.models import PermissionModel, WorkspaceModel
from iam.infrastructure.observability import (
    DefaultWorkspaceRepositoryProbe,
    WorkspaceRepositoryProbe,
)
from iam.ports.repositories import IWorkspaceRepository
from infrastructure.database.models import as_utc


class WorkspaceRepository(IWorkspaceRepository):
    """Repository for resolving active Workspace aggregates from PostgreSQL.

    When a permission id is supplied, the permissions relationship is loaded
    in the same lookup with the id applied as a filter on the relationship,
    so the aggregate carries at most that one permission.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: WorkspaceRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultWorkspaceRepositoryProbe()

    async def get_active_by_tenant(
        self,
        tenant_id: TenantId,
        permission_id: PermissionId | None = None,
    ) -> Workspace | None:
        """Retrieve the active workspace of a tenant.

        Args:
            tenant_id: The tenant that owns the workspace
            permission_id: Optional permission to load alongside the workspace

        Returns:
            The Workspace aggregate, or None if not found or soft-deleted
        """
        stmt = (
            select(WorkspaceModel)
            .where(
                WorkspaceModel.tenant_id == tenant_id.value,
                WorkspaceModel.deleted_at.is_(None),
            )
            .order_by(WorkspaceModel.created_at, WorkspaceModel.id)
            .limit(1)
        )
        if permission_id is not None:
            # populate_existing replaces a collection loaded earlier with another filter
            stmt = stmt.options(
                selectinload(
                    WorkspaceModel.permissions.and_(
                        PermissionModel.id == permission_id.value
                    )
                )
            ).execution_options(populate_existing=True)

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.workspace_not_found("tenant", tenant_id.value)
            return None

        workspace = self._to_aggregate(
            model, include_permissions=permission_id is not None
        )
        self._probe.workspace_retrieved(workspace.id.value, len(workspace.permissions))
        return workspace

    async def get_active_by_id(self, workspace_id: WorkspaceId) -> Workspace | None:
        """Retrieve an active workspace by its ID.

        Args:
            workspace_id: The workspace to look up

        Returns:
            The Workspace aggregate (without permissions), or None if not
            found or soft-deleted
        """
        stmt = select(WorkspaceModel).where(
            WorkspaceModel.id == workspace_id.value,
            WorkspaceModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.workspace_not_found("id", workspace_id.value)
            return None

        self._probe.workspace_retrieved(model.id, 0)
        return self._to_aggregate(model, include_permissions=False)

    def _to_aggregate(
        self, model: WorkspaceModel, include_permissions: bool
    ) -> Workspace:
        """Convert SQLAlchemy model to domain aggregate.

        Args:
            model: The WorkspaceModel to convert
            include_permissions: Whether the permissions relationship was
                loaded by the query

        Returns:
            The Workspace domain aggregate
        """
        permissions = (
            [self._permission_to_aggregate(p) for p in model.permissions]
            if include_permissions
            else []
        )
        return Workspace(
            id=WorkspaceId(value=model.id),
            tenant_id=TenantId(value=model.tenant_id),
            name=model.name,
            permissions=permissions,
        )

    @staticmethod
    def _permission_to_aggregate(model: PermissionModel) -> Permission:
        return Permission(
            id=PermissionId(value=model.id),
            workspace_id=WorkspaceId(value=model.workspace_id),
            name=model.name,
            description=model.description,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
