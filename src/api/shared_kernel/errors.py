"""Error codes shared by every HTTP surface.

Failures are reported to callers as ``{"code": ..., "message": ...}``
so clients can branch on a stable code instead of parsing messages.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stable error codes returned in HTTP error details."""

    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


def error_detail(code: ErrorCode, message: str) -> dict[str, Any]:
    """Build the ``detail`` payload for an HTTPException."""
    return {"code": code.value, "message": message}


def with_support_contact(message: str, support_email: str) -> str:
    """Append the support contact sentence to a user-facing message."""
    return f"{message} Please contact support using {support_email}."
