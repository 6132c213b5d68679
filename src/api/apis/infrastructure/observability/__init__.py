"""Domain-Oriented Observability for APIs infrastructure."""

from apis.infrastructure.observability.repository_probe import (
    ApiRepositoryProbe,
    DefaultApiRepositoryProbe,
    DefaultKeyRepositoryProbe,
    KeyRepositoryProbe,
)

__all__ = [
    "ApiRepositoryProbe",
    "DefaultApiRepositoryProbe",
    "KeyRepositoryProbe",
    "DefaultKeyRepositoryProbe",
]
