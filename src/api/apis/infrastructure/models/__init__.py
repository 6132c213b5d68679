"""SQLAlchemy ORM models for APIs bounded context."""

from apis.infrastructure.models.api import ApiModel
from apis.infrastructure.models.key import KeyModel

__all__ = ["ApiModel", "KeyModel"]
