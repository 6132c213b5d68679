"""Application-layer value objects for IAM bounded context.

These represent the authentication context of a request rather than core
business entities, so they live in the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from iam.domain.aggregates import RootKey, Workspace
from iam.domain.value_objects import TenantId, UserId
from shared_kernel.audit import AuditContext


@dataclass(frozen=True)
class SessionUser:
    """A dashboard user authenticated by a session token.

    Attributes:
        user_id: The user from the token's subject claim
        username: Display username (falls back to the user id)
        tenant_id: The tenant the session is scoped to
    """

    user_id: UserId
    username: str
    tenant_id: TenantId


@dataclass(frozen=True)
class WorkspaceScope:
    """Explicit request scope handed to workspace mutations.

    Carries everything a mutation needs to know about its caller, so
    services never read ambient request state.
    """

    tenant_id: TenantId
    user_id: UserId
    audit: AuditContext


@dataclass(frozen=True)
class RootKeyPrincipal:
    """A verified root key together with the workspace it manages."""

    root_key: RootKey
    workspace: Workspace
