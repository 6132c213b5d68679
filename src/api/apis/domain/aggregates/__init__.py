"""Domain aggregates for APIs context."""

from apis.domain.aggregates.api import Api
from apis.domain.aggregates.key import Key

__all__ = ["Api", "Key"]
