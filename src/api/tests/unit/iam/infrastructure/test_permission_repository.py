"""Unit tests for PermissionRepository against an in-memory SQLite database."""

from datetime import UTC, datetime
from unittest.mock import create_autospec

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from iam.domain.aggregates import Permission
from iam.domain.value_objects import PermissionId, WorkspaceId
from iam.infrastructure.models import PermissionModel
from iam.infrastructure.observability import PermissionRepositoryProbe
from iam.infrastructure.permission_repository import PermissionRepository
from iam.ports.exceptions import PermissionNotFoundError

UPDATED_AT = datetime(2026, 2, 1, tzinfo=UTC)


@pytest.fixture
def mock_probe():
    return create_autospec(PermissionRepositoryProbe, instance=True)


@pytest.fixture
def repository(session, mock_probe) -> PermissionRepository:
    return PermissionRepository(session=session, probe=mock_probe)


def _permission(id: str, workspace_id: str, name: str) -> Permission:
    return Permission(
        id=PermissionId(value=id),
        workspace_id=WorkspaceId(value=workspace_id),
        name=name,
        description=None,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
        updated_at=UPDATED_AT,
    )


class TestSave:
    @pytest.mark.asyncio
    async def test_persists_name_description_and_updated_at(
        self,
        seed,
        session,
        session_factory,
        repository,
        mock_probe,
        workspace_row,
        permission_row,
    ):
        await seed(workspace_row("ws_1"), permission_row("perm_1", "ws_1", "api.read"))

        await repository.save(_permission("perm_1", "ws_1", "api.read_key"))
        await session.commit()

        async with session_factory() as fresh:
            model = (
                await fresh.execute(
                    select(PermissionModel).where(PermissionModel.id == "perm_1")
                )
            ).scalar_one()
        assert model.name == "api.read_key"
        assert model.description is None
        assert model.updated_at.replace(tzinfo=UTC) == UPDATED_AT
        mock_probe.permission_saved.assert_called_once_with("perm_1", "ws_1")

    @pytest.mark.asyncio
    async def test_missing_permission_raises(self, repository, mock_probe):
        with pytest.raises(PermissionNotFoundError):
            await repository.save(_permission("perm_missing", "ws_1", "api.read"))

        mock_probe.permission_not_found.assert_called_once_with("perm_missing", "ws_1")

    @pytest.mark.asyncio
    async def test_write_is_scoped_to_workspace(
        self, seed, repository, workspace_row, permission_row
    ):
        await seed(
            workspace_row("ws_1"),
            workspace_row("ws_2", tenant_id="org_2"),
            permission_row("perm_1", "ws_2", "api.read"),
        )

        with pytest.raises(PermissionNotFoundError):
            await repository.save(_permission("perm_1", "ws_1", "api.hijack"))

    @pytest.mark.asyncio
    async def test_duplicate_name_in_workspace_fails_on_flush(
        self, seed, repository, workspace_row, permission_row
    ):
        await seed(
            workspace_row("ws_1"),
            permission_row("perm_1", "ws_1", "api.read"),
            permission_row("perm_2", "ws_1", "api.write"),
        )

        with pytest.raises(IntegrityError):
            await repository.save(_permission("perm_2", "ws_1", "api.read"))
