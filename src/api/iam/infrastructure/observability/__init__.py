"""Domain-Oriented Observability for IAM infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from iam.infrastructure.observability.repository_probe import (
    DefaultPermissionRepositoryProbe,
    DefaultRootKeyRepositoryProbe,
    DefaultWorkspaceRepositoryProbe,
    PermissionRepositoryProbe,
    RootKeyRepositoryProbe,
    WorkspaceRepositoryProbe,
)

__all__ = [
    "WorkspaceRepositoryProbe",
    "DefaultWorkspaceRepositoryProbe",
    "PermissionRepositoryProbe",
    "DefaultPermissionRepositoryProbe",
    "RootKeyRepositoryProbe",
    "DefaultRootKeyRepositoryProbe",
]
