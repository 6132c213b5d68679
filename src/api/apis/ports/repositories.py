"""Repository protocols (ports) for APIs bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from apis.domain.aggregates import Api
from apis.domain.value_objects import ApiId, KeyAuthId, KeyFilter, KeyPage
from shared_kernel.identifiers import WorkspaceId


@runtime_checkable
class IApiRepository(Protocol):
    """Read-only repository for Api lookup."""

    async def get_active(self, api_id: ApiId, workspace_id: WorkspaceId) -> Api | None:
        """Retrieve a non-deleted Api owned by the given workspace.

        Returns:
            The Api aggregate, or None if unknown, soft-deleted, or owned by
            another workspace
        """
        ...


@runtime_checkable
class IKeyRepository(Protocol):
    """Read-only repository for key listings."""

    async def list_page(
        self,
        key_auth_id: KeyAuthId,
        workspace_id: WorkspaceId,
        filters: KeyFilter,
        limit: int,
        offset: int,
    ) -> KeyPage:
        """List one page of non-deleted keys of a keyring.

        Keys are ordered by created_at then id. The page total is the count
        of all keys matching the same predicate, ignoring limit and offset.

        Args:
            key_auth_id: The keyring whose keys are listed
            workspace_id: The workspace the keys must belong to
            filters: Optional filters (owner_id)
            limit: Maximum number of keys to return
            offset: Number of matching keys to skip

        Returns:
            KeyPage with the window's keys and the filtered total
        """
        ...
