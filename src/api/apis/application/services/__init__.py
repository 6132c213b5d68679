"""Application services for APIs bounded context."""

from apis.application.services.key_directory_service import KeyDirectoryService

__all__ = ["KeyDirectoryService"]
