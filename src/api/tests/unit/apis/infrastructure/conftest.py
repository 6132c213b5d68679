"""Row factories for APIs repository tests."""

from datetime import UTC, datetime, timedelta

import pytest

from apis.infrastructure.models import ApiModel, KeyModel

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
def api_row():
    def _api_row(
        id: str = "api_1",
        workspace_id: str = "ws_1",
        key_auth_id: str = "ks_1",
        deleted: bool = False,
    ) -> ApiModel:
        return ApiModel(
            id=id,
            workspace_id=workspace_id,
            key_auth_id=key_auth_id,
            name=f"Api {id}",
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
            deleted_at=BASE_TIME if deleted else None,
        )

    return _api_row


@pytest.fixture
def key_row():
    def _key_row(
        id: str,
        key_auth_id: str = "ks_1",
        workspace_id: str = "ws_1",
        created_offset: int = 0,
        owner_id: str | None = None,
        deleted: bool = False,
    ) -> KeyModel:
        return KeyModel(
            id=id,
            key_auth_id=key_auth_id,
            workspace_id=workspace_id,
            hash=f"hash-{id}",
            start=f"lk_{id[-4:]}",
            name=f"Key {id}",
            owner_id=owner_id,
            meta={"tier": "free"},
            created_at=BASE_TIME + timedelta(seconds=created_offset),
            updated_at=BASE_TIME,
            deleted_at=BASE_TIME if deleted else None,
        )

    return _key_row
