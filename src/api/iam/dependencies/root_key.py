"""Root key authentication for the public key-management API.

Root keys arrive as ``Authorization: Bearer <root key>``. A verified key
is resolved to the workspace it manages; that workspace scopes every query
the request makes.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultRootKeyServiceProbe,
    RootKeyServiceProbe,
)
from iam.application.services import RootKeyService, WorkspaceResolver
from iam.application.value_objects import RootKeyPrincipal
from iam.dependencies.authentication import bearer_scheme
from iam.dependencies.workspace import get_workspace_resolver
from iam.infrastructure.root_key_repository import RootKeyRepository
from iam.ports.exceptions import WorkspaceNotFoundError
from infrastructure.database.dependencies import get_write_session
from shared_kernel.errors import ErrorCode, error_detail


def get_root_key_service_probe() -> RootKeyServiceProbe:
    """Get RootKeyServiceProbe instance.

    Returns:
        DefaultRootKeyServiceProbe instance for observability
    """
    return DefaultRootKeyServiceProbe()


def get_root_key_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[RootKeyServiceProbe, Depends(get_root_key_service_probe)],
) -> RootKeyService:
    """Get RootKeyService instance.

    Args:
        session: Write session (usage tracking commits on it)
        probe: Root key service probe for observability

    Returns:
        RootKeyService instance
    """
    return RootKeyService(
        session=session,
        root_key_repository=RootKeyRepository(session=session),
        probe=probe,
    )


async def get_root_key_principal(
    root_key_service: Annotated[RootKeyService, Depends(get_root_key_service)],
    resolver: Annotated[WorkspaceResolver, Depends(get_workspace_resolver)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> RootKeyPrincipal:
    """Authenticate a root key and resolve the workspace it manages.

    Raises:
        HTTPException 401: If the key is missing, unknown, revoked or expired
        HTTPException 404: If the key's workspace is missing or deleted
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_detail(ErrorCode.UNAUTHORIZED, "Not authenticated"),
            headers={"WWW-Authenticate": "Bearer"},
        )

    root_key = await root_key_service.authenticate(credentials.credentials)
    if root_key is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_detail(
                ErrorCode.UNAUTHORIZED, "The root key is invalid or expired."
            ),
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        workspace = await resolver.resolve_by_id(root_key.workspace_id)
    except WorkspaceNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error_detail(
                ErrorCode.NOT_FOUND, "We are unable to find the correct workspace."
            ),
        )

    return RootKeyPrincipal(root_key=root_key, workspace=workspace)
