"""Permission aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from iam.domain.value_objects import (
    PermissionId,
    WorkspaceId,
    validate_permission_name,
)


@dataclass
class Permission:
    """A named RBAC capability scoped to a single workspace.

    Business rules:
    - The name follows the permission naming rules (see
      validate_permission_name)
    - Every change refreshes updated_at
    """

    id: PermissionId
    workspace_id: WorkspaceId
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    def update(self, name: str, description: str | None) -> None:
        """Rename the permission and replace its description.

        Args:
            name: New permission name
            description: New description, or None to clear it

        Raises:
            ValueError: If the name breaks the naming rules
        """
        self.name = validate_permission_name(name)
        self.description = description
        self.updated_at = datetime.now(UTC)
