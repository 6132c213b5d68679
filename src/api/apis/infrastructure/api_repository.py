"""PostgreSQL implementation of IApiRepository."""

from __future__ import annotations

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from apis.domain.aggregates import Api
from apis.domain.value_objects import ApiId, KeyAuthId
from apis.infrastructure.models import ApiModel
from apis.infrastructure.observability import (
    ApiRepositoryProbe,
    DefaultApiRepositoryProbe,
)
from apis.ports.repositories import IApiRepository
from shared_kernel.identifiers import WorkspaceId


class ApiRepository(IApiRepository):
    """Repository for reading Api aggregates from PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: ApiRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultApiRepositoryProbe()

    async def get_active(self, api_id: ApiId, workspace_id: WorkspaceId) -> Api | None:
        """Retrieve a non-deleted Api owned by the given workspace.

        Args:
            api_id: The Api to look up
            workspace_id: The workspace that must own it

        Returns:
            The Api aggregate, or None if unknown, soft-deleted, or owned by
            another workspace
        """
        stmt = select(ApiModel).where(
            and_(
                ApiModel.id == api_id.value,
                ApiModel.workspace_id == workspace_id.value,
                ApiModel.deleted_at.is_(None),
            )
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.api_not_found(api_id.value)
            return None

        self._probe.api_retrieved(api_id.value)
        return Api(
            id=ApiId(value=model.id),
            workspace_id=WorkspaceId(value=model.workspace_id),
            key_auth_id=KeyAuthId(value=model.key_auth_id),
            name=model.name,
        )
