"""Unit test fixtures.

Repository tests run against an in-memory SQLite database (aiosqlite)
created from the ORM metadata, so query semantics are exercised without a
PostgreSQL server.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from structlog.testing import capture_logs

import apis.infrastructure.models  # noqa: F401
import iam.infrastructure.models  # noqa: F401
import infrastructure.outbox.models  # noqa: F401
from infrastructure.database.models import Base
from shared_kernel.observability_context import ObservationContext


@pytest.fixture
async def engine():
    """In-memory SQLite engine with every table created."""
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
def mock_session():
    """Create mock async session with transaction support."""
    session = AsyncMock()
    # Mock transaction context manager properly
    mock_transaction = MagicMock()
    mock_transaction.__aenter__ = AsyncMock(return_value=None)
    mock_transaction.__aexit__ = AsyncMock(return_value=None)
    session.begin = MagicMock(return_value=mock_transaction)
    return session


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 8, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def captured_logs():
    """Events emitted through structlog's default pipeline during the test.

    Defaults are restored first so a logger cached by an earlier app
    lifespan cannot filter or swallow the events.
    """
    structlog.reset_defaults()
    with capture_logs() as logs:
        yield logs
    structlog.reset_defaults()


@pytest.fixture
def observation_context() -> ObservationContext:
    return ObservationContext(
        request_id="req-1",
        user_id="user_ctx",
        tenant_id="org_ctx",
        workspace_id="ws_ctx",
    )
