"""RBAC permission endpoints."""

from iam.presentation.permissions.routes import router

__all__ = ["router"]
