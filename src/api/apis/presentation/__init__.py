"""APIs presentation layer.

Public, root-key authenticated endpoints under /v1/apis.
"""

from __future__ import annotations

from fastapi import APIRouter

from apis.presentation import keys

router = APIRouter(
    prefix="/v1/apis",
    tags=["apis"],
)

router.include_router(keys.router)

__all__ = ["router"]
