"""Pydantic models for permission requests."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iam.domain.value_objects import PERMISSION_NAME_MIN_LENGTH, PERMISSION_NAME_PATTERN


class UpdatePermissionRequest(BaseModel):
    """Request model for renaming a permission.

    description is required but may be null, which clears it.
    """

    id: str = Field(..., description="Permission ID", min_length=1)
    name: str = Field(
        ...,
        description=(
            "Permission name. Letters, numbers, underscores, colons, dashes, "
            "periods and asterisks"
        ),
        min_length=PERMISSION_NAME_MIN_LENGTH,
        max_length=512,
        pattern=PERMISSION_NAME_PATTERN,
    )
    description: str | None = Field(..., description="Permission description")
