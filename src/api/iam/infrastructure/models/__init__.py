"""SQLAlchemy ORM models for IAM bounded context."""

from iam.infrastructure.models.permission import PermissionModel
from iam.infrastructure.models.root_key import RootKeyModel
from iam.infrastructure.models.workspace import WorkspaceModel

__all__ = [
    "PermissionModel",
    "RootKeyModel",
    "WorkspaceModel",
]
