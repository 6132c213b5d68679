"""Unit tests for the key listing route."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, create_autospec

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from apis.application.services import KeyDirectoryService
from apis.dependencies.key_directory import get_key_directory_service
from apis.domain.aggregates import Key
from apis.domain.value_objects import (
    ApiId,
    KeyAuthId,
    KeyFilter,
    KeyId,
    KeyPage,
    PageRequest,
)
from apis.ports.exceptions import ApiNotFoundError
from apis.presentation import router
from iam.application.value_objects import RootKeyPrincipal
from iam.dependencies.root_key import get_root_key_principal
from iam.domain.aggregates import RootKey, Workspace
from iam.domain.value_objects import RootKeyId, TenantId
from shared_kernel.identifiers import WorkspaceId

WORKSPACE_ID = WorkspaceId(value="ws_1")


@pytest.fixture
def principal() -> RootKeyPrincipal:
    return RootKeyPrincipal(
        root_key=RootKey(
            id=RootKeyId(value="root_1"),
            workspace_id=WORKSPACE_ID,
            name="ci",
            key_hash="$2b$12$hash",
            prefix="lk_root_abcd",
            created_at=datetime(2025, 1, 1, tzinfo=UTC),
        ),
        workspace=Workspace(
            id=WORKSPACE_ID, tenant_id=TenantId(value="org_1"), name="Acme"
        ),
    )


@pytest.fixture
def key_page() -> KeyPage:
    key = Key(
        id=KeyId(value="key_1"),
        key_auth_id=KeyAuthId(value="ks_1"),
        workspace_id=WORKSPACE_ID,
        start="lk_3ZbP",
        created_at=datetime(2026, 1, 1, 9, 30, tzinfo=UTC),
        name="checkout",
        owner_id="user_1",
        meta={"plan": "pro"},
    )
    return KeyPage(keys=(key,), total=42)


@pytest.fixture
def mock_key_directory_service(key_page):
    service = create_autospec(KeyDirectoryService, instance=True)
    service.list_keys = AsyncMock(return_value=key_page)
    return service


@pytest.fixture
def test_client(principal, mock_key_directory_service):
    app = FastAPI()
    app.dependency_overrides[get_root_key_principal] = lambda: principal
    app.dependency_overrides[get_key_directory_service] = (
        lambda: mock_key_directory_service
    )
    app.include_router(router)
    return TestClient(app)


class TestListKeysRoute:
    def test_returns_camel_case_page(self, test_client):
        response = test_client.get("/v1/apis/api_1/keys")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["total"] == 42
        (key,) = body["keys"]
        assert key["id"] == "key_1"
        assert key["start"] == "lk_3ZbP"
        assert key["apiId"] == "api_1"
        assert key["workspaceId"] == "ws_1"
        assert key["ownerId"] == "user_1"
        assert key["meta"] == {"plan": "pro"}
        assert key["createdAt"].startswith("2026-01-01T09:30:00")
        assert key["expires"] is None
        assert "hash" not in key

    def test_passes_query_to_service_in_root_key_workspace(
        self, test_client, mock_key_directory_service
    ):
        test_client.get(
            "/v1/apis/api_1/keys",
            params={"ownerId": "user_1", "limit": 5, "offset": 10},
        )

        mock_key_directory_service.list_keys.assert_awaited_once_with(
            api_id=ApiId(value="api_1"),
            workspace_id=WORKSPACE_ID,
            filters=KeyFilter(owner_id="user_1"),
            page=PageRequest(limit=5, offset=10),
        )

    def test_defaults_to_unfiltered_first_page(
        self, test_client, mock_key_directory_service
    ):
        test_client.get("/v1/apis/api_1/keys")

        kwargs = mock_key_directory_service.list_keys.await_args.kwargs
        assert kwargs["filters"] == KeyFilter()
        assert kwargs["page"] == PageRequest(limit=100, offset=0)

    @pytest.mark.parametrize(
        "params",
        [{"limit": 0}, {"limit": 101}, {"offset": -1}, {"limit": "many"}],
    )
    def test_out_of_range_window_is_422(
        self, test_client, mock_key_directory_service, params
    ):
        response = test_client.get("/v1/apis/api_1/keys", params=params)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        mock_key_directory_service.list_keys.assert_not_awaited()

    def test_unknown_api_is_404(self, test_client, mock_key_directory_service):
        mock_key_directory_service.list_keys.side_effect = ApiNotFoundError("nope")

        response = test_client.get("/v1/apis/api_missing/keys")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == {
            "code": "NOT_FOUND",
            "message": "We are unable to find the requested api.",
        }

    def test_blank_api_id_is_404_without_calling_service(
        self, test_client, mock_key_directory_service
    ):
        response = test_client.get("/v1/apis/%20/keys")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        mock_key_directory_service.list_keys.assert_not_awaited()

    def test_unexpected_error_is_500(self, test_client, mock_key_directory_service):
        mock_key_directory_service.list_keys.side_effect = RuntimeError("db down")

        response = test_client.get("/v1/apis/api_1/keys")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        detail = response.json()["detail"]
        assert detail["code"] == "INTERNAL_SERVER_ERROR"
        assert detail["message"].startswith("We are unable to list the keys.")
        assert "db down" not in response.text
