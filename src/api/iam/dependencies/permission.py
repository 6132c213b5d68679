"""FastAPI dependency injection for permission mutations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultPermissionServiceProbe,
    PermissionServiceProbe,
)
from iam.application.services import PermissionService, WorkspaceResolver
from iam.dependencies.outbox import get_outbox_repository
from iam.dependencies.workspace import get_workspace_resolver
from iam.infrastructure.permission_repository import PermissionRepository
from infrastructure.audit_dependencies import get_audit_log_ingestor
from infrastructure.database.dependencies import get_write_session
from infrastructure.outbox.repository import OutboxRepository
from infrastructure.settings import get_audit_settings
from shared_kernel.audit import AuditLogIngestor


def get_permission_service_probe() -> PermissionServiceProbe:
    """Get PermissionServiceProbe instance.

    Returns:
        DefaultPermissionServiceProbe instance for observability
    """
    return DefaultPermissionServiceProbe()


def get_permission_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> PermissionRepository:
    """Get PermissionRepository instance.

    Args:
        session: Async database session

    Returns:
        PermissionRepository instance
    """
    return PermissionRepository(session=session)


def get_permission_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    resolver: Annotated[WorkspaceResolver, Depends(get_workspace_resolver)],
    permission_repo: Annotated[
        PermissionRepository, Depends(get_permission_repository)
    ],
    ingestor: Annotated[AuditLogIngestor, Depends(get_audit_log_ingestor)],
    outbox: Annotated[OutboxRepository, Depends(get_outbox_repository)],
    probe: Annotated[PermissionServiceProbe, Depends(get_permission_service_probe)],
) -> PermissionService:
    """Get PermissionService instance.

    Every collaborator shares the request's write session via FastAPI
    dependency caching, so the outbox append (OUTBOX policy) lands in the
    same transaction as the permission write.

    Returns:
        PermissionService configured with the current audit delivery policy
    """
    return PermissionService(
        session=session,
        workspace_resolver=resolver,
        permission_repository=permission_repo,
        audit_log_ingestor=ingestor,
        outbox=outbox,
        delivery_policy=get_audit_settings().delivery_policy,
        probe=probe,
    )
