"""Key listing endpoints."""

from apis.presentation.keys.routes import router

__all__ = ["router"]
