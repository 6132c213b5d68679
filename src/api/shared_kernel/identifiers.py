"""Identifiers shared across bounded contexts.

Every context scopes its data by workspace, so WorkspaceId lives here
rather than in any one context.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self


@dataclass(frozen=True)
class PrefixedId:
    """Base for identifiers of the form ``<prefix>_<suffix>``.

    Ids are minted by the dashboard and arrive here from request bodies,
    path parameters and token claims, so they are accepted as opaque
    strings. The prefix documents the expected shape.
    """

    prefix: ClassVar[str] = ""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create an identifier from a string value.

        Raises:
            ValueError: If value is empty or whitespace
        """
        if not value or not value.strip():
            raise ValueError(f"Invalid {cls.__name__}: value cannot be blank")
        return cls(value=value)


@dataclass(frozen=True)
class WorkspaceId(PrefixedId):
    """Identifier for a Workspace."""

    prefix: ClassVar[str] = "ws"
