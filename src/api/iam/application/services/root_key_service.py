"""Root key application service for IAM bounded context.

Verifies root key secrets presented as bearer credentials and tracks usage.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultRootKeyServiceProbe,
    RootKeyServiceProbe,
)
from iam.application.security import extract_prefix, verify_root_key_secret
from iam.domain.aggregates import RootKey
from iam.ports.repositories import IRootKeyRepository


class RootKeyService:
    """Application service for root key verification."""

    def __init__(
        self,
        session: AsyncSession,
        root_key_repository: IRootKeyRepository,
        probe: RootKeyServiceProbe | None = None,
    ) -> None:
        self._session = session
        self._root_key_repository = root_key_repository
        self._probe = probe or DefaultRootKeyServiceProbe()

    async def authenticate(self, secret: str) -> RootKey | None:
        """Verify a root key secret and record its usage.

        Args:
            secret: The plaintext root key secret to validate

        Returns:
            The RootKey aggregate if valid, None if unknown, revoked or expired
        """
        root_key = await self._root_key_repository.get_verified_key(
            secret=secret,
            extract_prefix_fn=extract_prefix,
            verify_hash_fn=verify_root_key_secret,
        )
        if root_key is None:
            self._probe.root_key_authentication_failed(reason="not_found")
            return None

        if not root_key.is_valid():
            self._probe.root_key_authentication_failed(
                reason="revoked" if root_key.is_revoked else "expired"
            )
            return None

        # The lookup above auto-began a transaction; commit it with the usage update
        root_key.record_usage()
        await self._root_key_repository.save(root_key)
        await self._session.commit()

        self._probe.root_key_authenticated(
            root_key_id=root_key.id.value,
            workspace_id=root_key.workspace_id.value,
        )
        return root_key
