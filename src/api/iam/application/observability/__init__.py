"""Domain-Oriented Observability for IAM application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from iam.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.observability.permission_service_probe import (
    DefaultPermissionServiceProbe,
    PermissionServiceProbe,
)
from iam.application.observability.root_key_service_probe import (
    DefaultRootKeyServiceProbe,
    RootKeyServiceProbe,
)
from iam.application.observability.workspace_resolver_probe import (
    DefaultWorkspaceResolverProbe,
    WorkspaceResolverProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "PermissionServiceProbe",
    "DefaultPermissionServiceProbe",
    "RootKeyServiceProbe",
    "DefaultRootKeyServiceProbe",
    "WorkspaceResolverProbe",
    "DefaultWorkspaceResolverProbe",
]
