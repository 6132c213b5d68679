"""Api aggregate for APIs context."""

from __future__ import annotations

from dataclasses import dataclass

from apis.domain.value_objects import ApiId, KeyAuthId
from shared_kernel.identifiers import WorkspaceId


@dataclass
class Api:
    """A keyring owned by exactly one workspace.

    Keys reference their Api through key_auth_id, not through the Api's id.
    """

    id: ApiId
    workspace_id: WorkspaceId
    key_auth_id: KeyAuthId
    name: str
