"""Value objects for the APIs domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from shared_kernel.identifiers import PrefixedId

if TYPE_CHECKING:
    from apis.domain.aggregates import Key

# Upper bound on keys returned by one listing, whatever the caller asks for
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class ApiId(PrefixedId):
    """Identifier for an Api (a keyring owned by a workspace)."""

    prefix: ClassVar[str] = "api"


@dataclass(frozen=True)
class KeyAuthId(PrefixedId):
    """Identifier linking an Api to the keys it owns."""

    prefix: ClassVar[str] = "ks"


@dataclass(frozen=True)
class KeyId(PrefixedId):
    """Identifier for a Key."""

    prefix: ClassVar[str] = "key"


@dataclass(frozen=True)
class KeyFilter:
    """Optional filters applied to a key listing.

    Attributes:
        owner_id: Only list keys with exactly this owner, when set
    """

    owner_id: str | None = None


@dataclass(frozen=True)
class PageRequest:
    """Offset pagination window.

    Raises:
        ValueError: If limit is below 1 or offset is negative
    """

    limit: int = MAX_PAGE_SIZE
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")
        if self.offset < 0:
            raise ValueError(f"offset must not be negative, got {self.offset}")

    def clamped(self, max_size: int = MAX_PAGE_SIZE) -> PageRequest:
        """Return this window with limit capped at max_size."""
        if self.limit <= max_size:
            return self
        return PageRequest(limit=max_size, offset=self.offset)


@dataclass(frozen=True)
class KeyPage:
    """One page of keys plus the size of the whole filtered set.

    total counts every key matching the filters, independent of the window.
    """

    keys: tuple[Key, ...]
    total: int
