"""Ports for APIs bounded context."""

from apis.ports.exceptions import ApiNotFoundError
from apis.ports.repositories import IApiRepository, IKeyRepository

__all__ = ["ApiNotFoundError", "IApiRepository", "IKeyRepository"]
