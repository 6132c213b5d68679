"""FastAPI dependency injection for workspace resolution.

Resolvers run on the request's write session: mutations resolve inside
their own lookup transaction, root key authentication resolves on the
session it authenticated with.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultWorkspaceResolverProbe,
    WorkspaceResolverProbe,
)
from iam.application.services import WorkspaceResolver
from iam.infrastructure.workspace_repository import WorkspaceRepository
from infrastructure.database.dependencies import get_write_session


def get_workspace_resolver_probe() -> WorkspaceResolverProbe:
    """Get WorkspaceResolverProbe instance.

    Returns:
        DefaultWorkspaceResolverProbe instance for observability
    """
    return DefaultWorkspaceResolverProbe()


def get_workspace_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> WorkspaceRepository:
    """Get WorkspaceRepository instance.

    Args:
        session: Async database session

    Returns:
        WorkspaceRepository instance
    """
    return WorkspaceRepository(session=session)


def get_workspace_resolver(
    workspace_repo: Annotated[WorkspaceRepository, Depends(get_workspace_repository)],
    probe: Annotated[WorkspaceResolverProbe, Depends(get_workspace_resolver_probe)],
) -> WorkspaceResolver:
    """Get WorkspaceResolver instance.

    Args:
        workspace_repo: Workspace repository (shares the request's write session)
        probe: Workspace resolver probe for observability

    Returns:
        WorkspaceResolver instance
    """
    return WorkspaceResolver(workspace_repository=workspace_repo, probe=probe)
