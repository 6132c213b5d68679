"""Unit tests for ApiRepository against SQLite."""

from unittest.mock import create_autospec

import pytest

from apis.domain.value_objects import ApiId, KeyAuthId
from apis.infrastructure.api_repository import ApiRepository
from apis.infrastructure.observability import ApiRepositoryProbe
from shared_kernel.identifiers import WorkspaceId


@pytest.fixture
def mock_probe():
    return create_autospec(ApiRepositoryProbe, instance=True)


@pytest.fixture
def repository(session, mock_probe):
    return ApiRepository(session=session, probe=mock_probe)


class TestGetActive:
    @pytest.mark.asyncio
    async def test_returns_api_owned_by_workspace(
        self, repository, seed, api_row, mock_probe
    ):
        await seed(api_row())

        api = await repository.get_active(
            ApiId(value="api_1"), WorkspaceId(value="ws_1")
        )

        assert api is not None
        assert api.id == ApiId(value="api_1")
        assert api.key_auth_id == KeyAuthId(value="ks_1")
        assert api.name == "Api api_1"
        mock_probe.api_retrieved.assert_called_once_with("api_1")

    @pytest.mark.asyncio
    async def test_api_of_another_workspace_is_invisible(
        self, repository, seed, api_row, mock_probe
    ):
        await seed(api_row(workspace_id="ws_other"))

        api = await repository.get_active(
            ApiId(value="api_1"), WorkspaceId(value="ws_1")
        )

        assert api is None
        mock_probe.api_not_found.assert_called_once_with("api_1")

    @pytest.mark.asyncio
    async def test_soft_deleted_api_is_invisible(self, repository, seed, api_row):
        await seed(api_row(deleted=True))

        assert (
            await repository.get_active(ApiId(value="api_1"), WorkspaceId(value="ws_1"))
            is None
        )

    @pytest.mark.asyncio
    async def test_unknown_api_returns_none(self, repository):
        assert (
            await repository.get_active(
                ApiId(value="api_missing"), WorkspaceId(value="ws_1")
            )
            is None
        )
