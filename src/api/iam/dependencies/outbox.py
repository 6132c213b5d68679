from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from infrastructure.outbox.repository import OutboxRepository


def get_outbox_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> OutboxRepository:
    """Get OutboxRepository instance.

    The repository shares the request's write session, so appended entries
    commit or roll back together with the mutation that produced them.

    Args:
        session: Async database session (shared with calling service)

    Returns:
        OutboxRepository instance
    """
    return OutboxRepository(session=session)
