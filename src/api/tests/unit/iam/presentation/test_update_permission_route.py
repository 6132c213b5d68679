"""Unit tests for the rbac.updatePermission RPC route."""

from unittest.mock import AsyncMock, create_autospec

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from iam.application.services import PermissionService
from iam.application.value_objects import WorkspaceScope
from iam.dependencies.permission import get_permission_service
from iam.dependencies.session import get_workspace_scope
from iam.domain.value_objects import PermissionId, TenantId, UserId
from iam.ports.exceptions import (
    AuditLogNotRecordedError,
    PermissionNotFoundError,
    PermissionUpdateFailedError,
    WorkspaceNotFoundError,
)
from iam.presentation import router
from shared_kernel.audit import AuditContext

URL = "/rpc/rbac.updatePermission"


@pytest.fixture
def scope() -> WorkspaceScope:
    return WorkspaceScope(
        tenant_id=TenantId(value="org_1"),
        user_id=UserId(value="user_1"),
        audit=AuditContext(location="203.0.113.7", user_agent="pytest"),
    )


@pytest.fixture
def mock_permission_service():
    service = create_autospec(PermissionService, instance=True)
    service.update_permission = AsyncMock(return_value=None)
    return service


@pytest.fixture
def test_client(scope, mock_permission_service):
    app = FastAPI()
    app.dependency_overrides[get_workspace_scope] = lambda: scope
    app.dependency_overrides[get_permission_service] = lambda: mock_permission_service
    app.include_router(router)
    return TestClient(app)


def _body(**overrides):
    body = {"id": "perm_1", "name": "api.read", "description": "Read access"}
    body.update(overrides)
    return body


class TestUpdatePermissionRoute:
    def test_returns_204_and_delegates(
        self, test_client, mock_permission_service, scope
    ):
        response = test_client.post(URL, json=_body())

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""
        mock_permission_service.update_permission.assert_awaited_once_with(
            scope=scope,
            permission_id=PermissionId(value="perm_1"),
            name="api.read",
            description="Read access",
        )

    def test_null_description_is_accepted(self, test_client, mock_permission_service):
        response = test_client.post(URL, json=_body(description=None))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        call = mock_permission_service.update_permission.await_args
        assert call.kwargs["description"] is None

    def test_wildcard_name_is_accepted(self, test_client):
        response = test_client.post(URL, json=_body(name="api.*:read-write_v2"))

        assert response.status_code == status.HTTP_204_NO_CONTENT

    @pytest.mark.parametrize(
        "name",
        ["ab", "has space", "slash/name", "a" * 513],
    )
    def test_invalid_name_is_422(self, test_client, mock_permission_service, name):
        response = test_client.post(URL, json=_body(name=name))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        mock_permission_service.update_permission.assert_not_awaited()

    def test_missing_description_is_422(self, test_client):
        body = _body()
        del body["description"]

        response = test_client.post(URL, json=body)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_workspace_not_found_is_404(self, test_client, mock_permission_service):
        mock_permission_service.update_permission.side_effect = (
            WorkspaceNotFoundError("no workspace")
        )

        response = test_client.post(URL, json=_body())

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == {
            "code": "NOT_FOUND",
            "message": "We are unable to find the correct workspace. "
            "Please contact support using support@latchkey.dev.",
        }

    def test_blank_id_is_404_without_calling_service(
        self, test_client, mock_permission_service
    ):
        response = test_client.post(URL, json=_body(id="   "))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["message"].startswith(
            "We are unable to find the correct permission."
        )
        mock_permission_service.update_permission.assert_not_awaited()

    def test_permission_not_found_is_404(self, test_client, mock_permission_service):
        mock_permission_service.update_permission.side_effect = (
            PermissionNotFoundError("no permission")
        )

        response = test_client.post(URL, json=_body())

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["message"].startswith(
            "We are unable to find the correct permission."
        )

    def test_update_failure_is_500(self, test_client, mock_permission_service):
        mock_permission_service.update_permission.side_effect = (
            PermissionUpdateFailedError("write failed")
        )

        response = test_client.post(URL, json=_body())

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        detail = response.json()["detail"]
        assert detail["code"] == "INTERNAL_SERVER_ERROR"
        assert detail["message"].startswith("We are unable to update the permission.")

    def test_audit_failure_is_500_with_its_own_message(
        self, test_client, mock_permission_service
    ):
        mock_permission_service.update_permission.side_effect = (
            AuditLogNotRecordedError("sink down")
        )

        response = test_client.post(URL, json=_body())

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"]["message"].startswith(
            "The permission was updated but the audit log could not be recorded."
        )

    def test_unexpected_error_is_500(self, test_client, mock_permission_service):
        mock_permission_service.update_permission.side_effect = RuntimeError("boom")

        response = test_client.post(URL, json=_body())

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "boom" not in response.text
