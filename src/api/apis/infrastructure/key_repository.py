"""PostgreSQL implementation of IKeyRepository.

The page query and the count query share one predicate, so total always
describes the same set the page is cut from.
"""

from __future__ import annotations

from sqlalchemy import ColumnElement, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from apis.domain.aggregates import Key
from apis.domain.value_objects import KeyAuthId, KeyFilter, KeyId, KeyPage
from apis.infrastructure.models import KeyModel
from apis.infrastructure.observability import (
    DefaultKeyRepositoryProbe,
    KeyRepositoryProbe,
)
from apis.ports.repositories import IKeyRepository
from infrastructure.database.models import as_utc
from shared_kernel.identifiers import WorkspaceId


class KeyRepository(IKeyRepository):
    """Repository for paged key listings from PostgreSQL.

    Only the columns exposed by the Key aggregate are selected; hash is
    never read.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: KeyRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultKeyRepositoryProbe()

    async def list_page(
        self,
        key_auth_id: KeyAuthId,
        workspace_id: WorkspaceId,
        filters: KeyFilter,
        limit: int,
        offset: int,
    ) -> KeyPage:
        """List one page of non-deleted keys of a keyring.

        Args:
            key_auth_id: The keyring whose keys are listed
            workspace_id: The workspace the keys must belong to
            filters: Optional filters (owner_id)
            limit: Maximum number of keys to return
            offset: Number of matching keys to skip

        Returns:
            KeyPage with the window's keys and the filtered total
        """
        predicate = self._predicate(key_auth_id, workspace_id, filters)

        count_stmt = select(func.count()).select_from(KeyModel).where(predicate)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(
                KeyModel.id,
                KeyModel.key_auth_id,
                KeyModel.workspace_id,
                KeyModel.start,
                KeyModel.name,
                KeyModel.owner_id,
                KeyModel.meta,
                KeyModel.created_at,
                KeyModel.expires_at,
            )
            .where(predicate)
            .order_by(KeyModel.created_at.asc(), KeyModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        keys = tuple(
            Key(
                id=KeyId(value=row.id),
                key_auth_id=KeyAuthId(value=row.key_auth_id),
                workspace_id=WorkspaceId(value=row.workspace_id),
                start=row.start,
                name=row.name,
                owner_id=row.owner_id,
                meta=row.meta,
                created_at=as_utc(row.created_at),
                expires_at=as_utc(row.expires_at),
            )
            for row in result.all()
        )

        self._probe.key_page_retrieved(key_auth_id.value, len(keys), total, offset)
        return KeyPage(keys=keys, total=total)

    @staticmethod
    def _predicate(
        key_auth_id: KeyAuthId,
        workspace_id: WorkspaceId,
        filters: KeyFilter,
    ) -> ColumnElement[bool]:
        conditions = [
            KeyModel.key_auth_id == key_auth_id.value,
            KeyModel.workspace_id == workspace_id.value,
            KeyModel.deleted_at.is_(None),
        ]
        if filters.owner_id is not None:
            conditions.append(KeyModel.owner_id == filters.owner_id)
        return and_(*conditions)
