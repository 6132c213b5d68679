"""Domain aggregates for IAM context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from iam.domain.aggregates.permission import Permission
from iam.domain.aggregates.root_key import RootKey
from iam.domain.aggregates.workspace import Workspace

__all__ = [
    "Permission",
    "RootKey",
    "Workspace",
]
