"""Key directory application service for APIs bounded context.

Lists the keys of one Api, scoped to the workspace of the caller's root key.
"""

from __future__ import annotations

from apis.application.observability import (
    DefaultKeyDirectoryServiceProbe,
    KeyDirectoryServiceProbe,
)
from apis.domain.value_objects import (
    MAX_PAGE_SIZE,
    ApiId,
    KeyFilter,
    KeyPage,
    PageRequest,
)
from apis.ports.exceptions import ApiNotFoundError
from apis.ports.repositories import IApiRepository, IKeyRepository
from shared_kernel.identifiers import WorkspaceId


class KeyDirectoryService:
    """Application service for read-only key listings.

    Runs on the read session and never writes.
    """

    def __init__(
        self,
        api_repository: IApiRepository,
        key_repository: IKeyRepository,
        probe: KeyDirectoryServiceProbe | None = None,
    ) -> None:
        """Initialize KeyDirectoryService with dependencies.

        Args:
            api_repository: Repository for Api lookup
            key_repository: Repository for key listings
            probe: Optional domain probe for observability
        """
        self._api_repository = api_repository
        self._key_repository = key_repository
        self._probe = probe or DefaultKeyDirectoryServiceProbe()

    async def list_keys(
        self,
        api_id: ApiId,
        workspace_id: WorkspaceId,
        filters: KeyFilter | None = None,
        page: PageRequest | None = None,
    ) -> KeyPage:
        """List one page of an Api's keys.

        Args:
            api_id: The Api whose keys are listed
            workspace_id: The workspace the caller is scoped to
            filters: Optional filters (owner_id)
            page: Pagination window; limit is capped at MAX_PAGE_SIZE

        Returns:
            KeyPage with the page's keys and the filtered total

        Raises:
            ApiNotFoundError: If the Api is unknown, soft-deleted, or owned by
                another workspace
        """
        filters = filters or KeyFilter()
        requested = page or PageRequest()
        window = requested.clamped(MAX_PAGE_SIZE)
        if window.limit != requested.limit:
            self._probe.page_size_clamped(requested.limit, window.limit)

        api = await self._api_repository.get_active(api_id, workspace_id)
        if api is None:
            self._probe.api_not_found(api_id.value, workspace_id.value)
            raise ApiNotFoundError(f"Api {api_id.value} not found")

        result = await self._key_repository.list_page(
            key_auth_id=api.key_auth_id,
            workspace_id=workspace_id,
            filters=filters,
            limit=window.limit,
            offset=window.offset,
        )

        self._probe.key_list_retrieved(
            api_id=api_id.value,
            workspace_id=workspace_id.value,
            count=len(result.keys),
            total=result.total,
        )
        return result
