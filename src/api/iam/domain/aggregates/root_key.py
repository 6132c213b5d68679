"""RootKey aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from iam.domain.value_objects import RootKeyId, WorkspaceId


@dataclass
class RootKey:
    """A root credential with elevated scope over one workspace's APIs.

    Root keys are issued outside this service; here they are only verified.

    Business rules:
    - Revoked keys are invalid
    - Keys with an expiry in the past are invalid
    - Usage is tracked via last_used_at
    """

    id: RootKeyId
    workspace_id: WorkspaceId
    name: str | None
    key_hash: str
    prefix: str
    created_at: datetime
    expires_at: datetime | None = None
    last_used_at: datetime | None = None
    is_revoked: bool = False

    def record_usage(self) -> None:
        """Record that this root key was used."""
        self.last_used_at = datetime.now(UTC)

    def is_valid(self) -> bool:
        """Check if this root key may authenticate a request."""
        if self.is_revoked:
            return False

        if self.expires_at is not None and datetime.now(UTC) >= self.expires_at:
            return False

        return True
