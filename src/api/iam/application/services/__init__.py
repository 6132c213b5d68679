"""Application services for IAM bounded context."""

from iam.application.services.permission_service import PermissionService
from iam.application.services.root_key_service import RootKeyService
from iam.application.services.workspace_resolver import WorkspaceResolver

__all__ = ["PermissionService", "RootKeyService", "WorkspaceResolver"]
