"""Domain-Oriented Observability for APIs application layer."""

from apis.application.observability.key_directory_service_probe import (
    DefaultKeyDirectoryServiceProbe,
    KeyDirectoryServiceProbe,
)

__all__ = [
    "KeyDirectoryServiceProbe",
    "DefaultKeyDirectoryServiceProbe",
]
