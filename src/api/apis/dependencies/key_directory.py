"""FastAPI dependency injection for key directory queries.

Listings run on the read session; root key authentication (in IAM) uses
the write session because it records usage.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apis.application.observability import (
    DefaultKeyDirectoryServiceProbe,
    KeyDirectoryServiceProbe,
)
from apis.application.services import KeyDirectoryService
from apis.infrastructure.api_repository import ApiRepository
from apis.infrastructure.key_repository import KeyRepository
from infrastructure.database.dependencies import get_read_session


def get_key_directory_service_probe() -> KeyDirectoryServiceProbe:
    """Get KeyDirectoryServiceProbe instance.

    Returns:
        DefaultKeyDirectoryServiceProbe instance for observability
    """
    return DefaultKeyDirectoryServiceProbe()


def get_key_directory_service(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    probe: Annotated[
        KeyDirectoryServiceProbe, Depends(get_key_directory_service_probe)
    ],
) -> KeyDirectoryService:
    """Get KeyDirectoryService instance.

    Args:
        session: Read-only database session
        probe: Key directory service probe for observability

    Returns:
        KeyDirectoryService instance
    """
    return KeyDirectoryService(
        api_repository=ApiRepository(session=session),
        key_repository=KeyRepository(session=session),
        probe=probe,
    )
