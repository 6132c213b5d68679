"""Unit tests for RootKeyService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, create_autospec

import pytest

from iam.application.observability import RootKeyServiceProbe
from iam.application.security import extract_prefix, verify_root_key_secret
from iam.application.services import RootKeyService
from iam.domain.aggregates import RootKey
from iam.domain.value_objects import RootKeyId, WorkspaceId
from iam.ports.repositories import IRootKeyRepository


@pytest.fixture
def mock_root_key_repository():
    repository = create_autospec(IRootKeyRepository, instance=True)
    repository.save = AsyncMock()
    return repository


@pytest.fixture
def mock_probe():
    return create_autospec(RootKeyServiceProbe, instance=True)


@pytest.fixture
def service(mock_session, mock_root_key_repository, mock_probe) -> RootKeyService:
    return RootKeyService(
        session=mock_session,
        root_key_repository=mock_root_key_repository,
        probe=mock_probe,
    )


def _root_key(**overrides) -> RootKey:
    fields = dict(
        id=RootKeyId(value="root_1"),
        workspace_id=WorkspaceId(value="ws_1"),
        name="ci",
        key_hash="$2b$12$hash",
        prefix="lk_root_abcd",
        created_at=datetime(2025, 1, 1, tzinfo=UTC),
    )
    fields.update(overrides)
    return RootKey(**fields)


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_valid_key_records_usage_and_commits(
        self, service, mock_session, mock_root_key_repository, mock_probe
    ):
        root_key = _root_key()
        mock_root_key_repository.get_verified_key = AsyncMock(return_value=root_key)

        result = await service.authenticate("lk_root_abcd_secret")

        assert result is root_key
        assert root_key.last_used_at is not None
        mock_root_key_repository.get_verified_key.assert_awaited_once_with(
            secret="lk_root_abcd_secret",
            extract_prefix_fn=extract_prefix,
            verify_hash_fn=verify_root_key_secret,
        )
        mock_root_key_repository.save.assert_awaited_once_with(root_key)
        mock_session.commit.assert_awaited_once()
        mock_probe.root_key_authenticated.assert_called_once_with(
            root_key_id="root_1", workspace_id="ws_1"
        )

    @pytest.mark.asyncio
    async def test_unknown_key_returns_none(
        self, service, mock_root_key_repository, mock_probe, mock_session
    ):
        mock_root_key_repository.get_verified_key = AsyncMock(return_value=None)

        assert await service.authenticate("lk_root_nope") is None

        mock_probe.root_key_authentication_failed.assert_called_once_with(
            reason="not_found"
        )
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("overrides", "reason"),
        [
            ({"is_revoked": True}, "revoked"),
            ({"expires_at": datetime.now(UTC) - timedelta(minutes=1)}, "expired"),
        ],
    )
    async def test_invalid_key_returns_none_without_recording_usage(
        self,
        service,
        mock_root_key_repository,
        mock_probe,
        overrides,
        reason,
    ):
        mock_root_key_repository.get_verified_key = AsyncMock(
            return_value=_root_key(**overrides)
        )

        assert await service.authenticate("lk_root_abcd_secret") is None

        mock_root_key_repository.save.assert_not_awaited()
        mock_probe.root_key_authentication_failed.assert_called_once_with(
            reason=reason
        )
