"""PostgreSQL implementation of IRootKeyRepository.

Root keys are issued elsewhere; this repository verifies secrets against
stored bcrypt hashes and persists usage tracking.
"""

from __future__ import annotations

from typing import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import RootKey
from iam.domain.value_objects import RootKeyId, WorkspaceId
from iam.infrastructure.models import RootKeyModel
from iam.infrastructure.observability import (
    DefaultRootKeyRepositoryProbe,
    RootKeyRepositoryProbe,
)
from iam.ports.repositories import IRootKeyRepository
from infrastructure.database.models import as_utc


class RootKeyRepository(IRootKeyRepository):
    """Repository for RootKey verification and usage tracking."""

    def __init__(
        self,
        session: AsyncSession,
        probe: RootKeyRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultRootKeyRepositoryProbe()

    async def get_verified_key(
        self,
        secret: str,
        extract_prefix_fn: Callable[[str], str],
        verify_hash_fn: Callable[[str, str], bool],
    ) -> RootKey | None:
        """Retrieve a root key by verifying its secret.

        Prefixes are not unique, so every candidate sharing the prefix is
        checked until one hash matches.

        Args:
            secret: The plaintext root key secret to verify
            extract_prefix_fn: Function to extract prefix from secret
            verify_hash_fn: Function to verify secret against hash

        Returns:
            The RootKey aggregate if the secret verifies, None otherwise
        """
        prefix = extract_prefix_fn(secret)
        stmt = select(RootKeyModel).where(RootKeyModel.prefix == prefix)
        result = await self._session.execute(stmt)
        candidates = result.scalars().all()

        for model in candidates:
            if verify_hash_fn(secret, model.key_hash):
                self._probe.root_key_verified(model.id)
                return self._to_aggregate(model)

        self._probe.root_key_not_verified(len(candidates))
        return None

    async def save(self, root_key: RootKey) -> None:
        """Persist usage tracking fields (last_used_at) of a root key.

        Args:
            root_key: The RootKey aggregate to persist
        """
        stmt = select(RootKeyModel).where(RootKeyModel.id == root_key.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return

        model.last_used_at = root_key.last_used_at
        await self._session.flush()
        self._probe.root_key_saved(root_key.id.value)

    def _to_aggregate(self, model: RootKeyModel) -> RootKey:
        """Convert SQLAlchemy model to domain aggregate."""
        return RootKey(
            id=RootKeyId(value=model.id),
            workspace_id=WorkspaceId(value=model.workspace_id),
            name=model.name,
            key_hash=model.key_hash,
            prefix=model.prefix,
            created_at=as_utc(model.created_at),
            expires_at=as_utc(model.expires_at),
            last_used_at=as_utc(model.last_used_at),
            is_revoked=model.is_revoked,
        )
