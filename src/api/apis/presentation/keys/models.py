"""Pydantic models for key listing responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apis.domain.aggregates import Key
from apis.domain.value_objects import ApiId, KeyPage


class KeyResponse(BaseModel):
    """A key as exposed to API consumers.

    The secret hash is never part of this model; start is the only
    secret-derived field.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Key ID")
    start: str = Field(..., description="First characters of the secret")
    api_id: str = Field(..., description="Api the key belongs to")
    workspace_id: str = Field(..., description="Workspace that owns the key")
    name: str | None = Field(None, description="Display name")
    owner_id: str | None = Field(None, description="Owner identifier")
    meta: dict[str, Any] | None = Field(None, description="Custom metadata")
    created_at: datetime = Field(..., description="When the key was created")
    expires: datetime | None = Field(None, description="When the key expires")

    @classmethod
    def from_domain(cls, key: Key, api_id: ApiId) -> KeyResponse:
        """Convert domain Key aggregate to API response.

        Args:
            key: Key domain aggregate
            api_id: The Api the key was listed under

        Returns:
            KeyResponse (without hash)
        """
        return cls(
            id=key.id.value,
            start=key.start,
            api_id=api_id.value,
            workspace_id=key.workspace_id.value,
            name=key.name,
            owner_id=key.owner_id,
            meta=key.meta,
            created_at=key.created_at,
            expires=key.expires_at,
        )


class KeyListResponse(BaseModel):
    """One page of keys plus the total number of matching keys."""

    keys: list[KeyResponse] = Field(..., description="Keys in this page")
    total: int = Field(..., description="Number of keys matching the filters")

    @classmethod
    def from_domain(cls, page: KeyPage, api_id: ApiId) -> KeyListResponse:
        return cls(
            keys=[KeyResponse.from_domain(key, api_id) for key in page.keys],
            total=page.total,
        )
