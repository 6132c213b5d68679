"""Key aggregate for APIs context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from apis.domain.value_objects import KeyAuthId, KeyId
from shared_kernel.identifiers import WorkspaceId


@dataclass
class Key:
    """A secret credential belonging to one Api.

    The secret hash never leaves the storage layer; start (the first few
    characters of the secret) is the only secret-derived field exposed.
    """

    id: KeyId
    key_auth_id: KeyAuthId
    workspace_id: WorkspaceId
    start: str
    created_at: datetime
    name: str | None = None
    owner_id: str | None = None
    meta: dict[str, Any] | None = field(default=None)
    expires_at: datetime | None = None
