"""IAM presentation layer - aggregate-based organization.

Dashboard-facing RPC endpoints. Each aggregate package contains its own
routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation import permissions

router = APIRouter(
    prefix="/rpc",
    tags=["rpc"],
)

router.include_router(permissions.router)

__all__ = ["router"]
