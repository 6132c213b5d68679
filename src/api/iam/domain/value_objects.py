"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from shared_kernel.identifiers import PrefixedId, WorkspaceId

# Permission names: at least 3 characters of alphanumerics, colons,
# periods, dashes, underscores and the "*" wildcard
PERMISSION_NAME_PATTERN = r"^[a-zA-Z0-9_:\-\.\*]+$"
PERMISSION_NAME_MIN_LENGTH = 3

_PERMISSION_NAME_RE = re.compile(PERMISSION_NAME_PATTERN)

__all__ = [
    "PERMISSION_NAME_MIN_LENGTH",
    "PERMISSION_NAME_PATTERN",
    "PermissionId",
    "RootKeyId",
    "TenantId",
    "UserId",
    "WorkspaceId",
    "validate_permission_name",
]


def validate_permission_name(name: str) -> str:
    """Check a permission name against the naming rules.

    Raises:
        ValueError: If the name is too short or has forbidden characters
    """
    if len(name) < PERMISSION_NAME_MIN_LENGTH or not _PERMISSION_NAME_RE.match(name):
        raise ValueError(
            "Permission name must be at least 3 characters long and only contain "
            "letters, numbers, underscores, colons, dashes, periods and asterisks"
        )
    return name


@dataclass(frozen=True)
class TenantId(PrefixedId):
    """Identifier of the tenant (organisation) a session belongs to."""

    prefix: ClassVar[str] = "org"


@dataclass(frozen=True)
class UserId(PrefixedId):
    """Identifier of an authenticated user."""

    prefix: ClassVar[str] = "user"


@dataclass(frozen=True)
class PermissionId(PrefixedId):
    """Identifier for an RBAC Permission."""

    prefix: ClassVar[str] = "perm"


@dataclass(frozen=True)
class RootKeyId(PrefixedId):
    """Identifier for a RootKey credential."""

    prefix: ClassVar[str] = "root"
