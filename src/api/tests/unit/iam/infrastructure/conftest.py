"""Row factories for IAM repository tests."""

from datetime import UTC, datetime, timedelta

import pytest

from iam.infrastructure.models import PermissionModel, WorkspaceModel

BASE_TIME = datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture
def seed(session_factory):
    """Insert rows in their own committed session."""

    async def _seed(*models) -> None:
        async with session_factory() as session:
            session.add_all(models)
            await session.commit()

    return _seed


@pytest.fixture
def workspace_row():
    def _workspace_row(
        id: str,
        tenant_id: str = "org_1",
        created_offset: int = 0,
        deleted: bool = False,
    ) -> WorkspaceModel:
        return WorkspaceModel(
            id=id,
            tenant_id=tenant_id,
            name=f"Workspace {id}",
            created_at=BASE_TIME + timedelta(minutes=created_offset),
            updated_at=BASE_TIME,
            deleted_at=BASE_TIME if deleted else None,
        )

    return _workspace_row


@pytest.fixture
def permission_row():
    def _permission_row(id: str, workspace_id: str, name: str) -> PermissionModel:
        return PermissionModel(
            id=id,
            workspace_id=workspace_id,
            name=name,
            description=f"{name} description",
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )

    return _permission_row
