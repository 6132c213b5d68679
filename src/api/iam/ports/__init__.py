"""Ports (interfaces) for IAM bounded context.

Ports define the contracts for repositories without specifying
implementation details, keeping the application layer independent of
infrastructure.
"""

from iam.ports.exceptions import (
    AuditLogNotRecordedError,
    PermissionNotFoundError,
    PermissionUpdateFailedError,
    WorkspaceNotFoundError,
)
from iam.ports.repositories import (
    IPermissionRepository,
    IRootKeyRepository,
    IWorkspaceRepository,
)

__all__ = [
    "AuditLogNotRecordedError",
    "IPermissionRepository",
    "IRootKeyRepository",
    "IWorkspaceRepository",
    "PermissionNotFoundError",
    "PermissionUpdateFailedError",
    "WorkspaceNotFoundError",
]
