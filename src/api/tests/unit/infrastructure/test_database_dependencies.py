"""Unit tests for database dependency injection."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pydantic import SecretStr

from infrastructure.database import dependencies
from infrastructure.settings import DatabaseSettings


@pytest.fixture(autouse=True)
def reset_engines():
    """Each test starts and ends without cached engines."""
    dependencies._write_engine = None
    dependencies._read_engine = None
    dependencies._write_sessionmaker = None
    dependencies._read_sessionmaker = None
    yield
    dependencies._write_engine = None
    dependencies._read_engine = None
    dependencies._write_sessionmaker = None
    dependencies._read_sessionmaker = None


@pytest.fixture
def db_settings() -> DatabaseSettings:
    return DatabaseSettings(
        host="localhost",
        database="test_db",
        username="test_user",
        password=SecretStr("pw"),
    )


class TestEngineSingletons:
    def test_write_engine_created_once(self, db_settings):
        with patch.object(
            dependencies, "get_database_settings", return_value=db_settings
        ):
            first = dependencies.get_write_engine()
            second = dependencies.get_write_engine()

        assert first is second
        assert dependencies.get_write_sessionmaker() is not None
        first.sync_engine.dispose()

    def test_read_and_write_engines_are_distinct(self, db_settings):
        with patch.object(
            dependencies, "get_database_settings", return_value=db_settings
        ):
            write_engine = dependencies.get_write_engine()
            read_engine = dependencies.get_read_engine()

        assert write_engine is not read_engine
        write_engine.sync_engine.dispose()
        read_engine.sync_engine.dispose()


class TestCloseDatabaseConnections:
    @pytest.mark.asyncio
    async def test_disposes_and_resets_engines(self):
        write_engine = MagicMock()
        write_engine.dispose = AsyncMock()
        read_engine = MagicMock()
        read_engine.dispose = AsyncMock()
        dependencies._write_engine = write_engine
        dependencies._read_engine = read_engine
        dependencies._write_sessionmaker = MagicMock()
        dependencies._read_sessionmaker = MagicMock()

        await dependencies.close_database_connections()

        write_engine.dispose.assert_awaited_once()
        read_engine.dispose.assert_awaited_once()
        assert dependencies._write_engine is None
        assert dependencies._read_engine is None
        assert dependencies._write_sessionmaker is None
        assert dependencies._read_sessionmaker is None

    @pytest.mark.asyncio
    async def test_noop_when_nothing_was_created(self):
        await dependencies.close_database_connections()

        assert dependencies._write_engine is None
