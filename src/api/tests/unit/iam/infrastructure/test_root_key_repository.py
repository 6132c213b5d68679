"""Unit tests for RootKeyRepository against an in-memory SQLite database."""

from datetime import UTC, datetime

import bcrypt
import pytest
from sqlalchemy import select

from iam.application.security import extract_prefix, verify_root_key_secret
from iam.domain.value_objects import RootKeyId, WorkspaceId
from iam.infrastructure.models import RootKeyModel
from iam.infrastructure.root_key_repository import RootKeyRepository

SECRET = "lk_root_abcd_first-secret"
OTHER_SECRET = "lk_root_abcd_second-secret"


def _root_key_row(id: str, secret: str, **overrides) -> RootKeyModel:
    fields = dict(
        id=id,
        workspace_id="ws_1",
        name=id,
        key_hash=bcrypt.hashpw(secret.encode(), bcrypt.gensalt()).decode(),
        prefix=extract_prefix(secret),
    )
    fields.update(overrides)
    return RootKeyModel(**fields)


@pytest.fixture
def repository(session) -> RootKeyRepository:
    return RootKeyRepository(session=session)


class TestGetVerifiedKey:
    @pytest.mark.asyncio
    async def test_matches_among_candidates_sharing_prefix(
        self, seed, repository, workspace_row
    ):
        await seed(
            workspace_row("ws_1"),
            _root_key_row("root_1", SECRET),
            _root_key_row("root_2", OTHER_SECRET),
        )

        root_key = await repository.get_verified_key(
            OTHER_SECRET, extract_prefix, verify_root_key_secret
        )

        assert root_key is not None
        assert root_key.id == RootKeyId(value="root_2")
        assert root_key.workspace_id == WorkspaceId(value="ws_1")
        assert root_key.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_wrong_secret_returns_none(self, seed, repository, workspace_row):
        await seed(workspace_row("ws_1"), _root_key_row("root_1", SECRET))

        assert (
            await repository.get_verified_key(
                "lk_root_abcd_wrong", extract_prefix, verify_root_key_secret
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_revoked_keys_are_still_returned_for_the_service_to_reject(
        self, seed, repository, workspace_row
    ):
        await seed(
            workspace_row("ws_1"), _root_key_row("root_1", SECRET, is_revoked=True)
        )

        root_key = await repository.get_verified_key(
            SECRET, extract_prefix, verify_root_key_secret
        )

        assert root_key.is_revoked
        assert not root_key.is_valid()


class TestSave:
    @pytest.mark.asyncio
    async def test_persists_last_used_at(
        self, seed, session, session_factory, repository, workspace_row
    ):
        await seed(workspace_row("ws_1"), _root_key_row("root_1", SECRET))
        root_key = await repository.get_verified_key(
            SECRET, extract_prefix, verify_root_key_secret
        )
        root_key.last_used_at = datetime(2026, 3, 1, tzinfo=UTC)

        await repository.save(root_key)
        await session.commit()

        async with session_factory() as fresh:
            model = (await fresh.execute(select(RootKeyModel))).scalar_one()
        assert model.last_used_at.replace(tzinfo=UTC) == datetime(2026, 3, 1, tzinfo=UTC)
