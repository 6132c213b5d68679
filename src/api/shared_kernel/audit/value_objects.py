"""Value objects describing audit log entries.

An audit log entry is an append-only record of a mutation performed by an
actor inside a workspace. Entries are immutable once built; the wire form
uses the camelCase keys expected by the audit log ingestion endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class AuditDeliveryPolicy(StrEnum):
    """How a mutation's audit entry is delivered.

    STRICT: ingest after commit and fail the request when ingestion fails.
    BEST_EFFORT: ingest after commit, log ingestion failures and succeed.
    OUTBOX: record the entry in the transactional outbox alongside the
        mutation and let the outbox worker deliver it.
    """

    STRICT = "strict"
    BEST_EFFORT = "best_effort"
    OUTBOX = "outbox"


@dataclass(frozen=True)
class AuditActor:
    """Who performed the audited action."""

    type: str
    id: str


@dataclass(frozen=True)
class AuditResource:
    """A resource touched by the audited action."""

    type: str
    id: str


@dataclass(frozen=True)
class AuditContext:
    """Request metadata captured at the edge for audit purposes.

    Attributes:
        location: Caller address, usually the first X-Forwarded-For hop
        user_agent: The caller's User-Agent header
    """

    location: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True)
class AuditLogEntry:
    """A single append-only audit record.

    Attributes:
        workspace_id: Workspace the mutation happened in
        actor: Who performed the mutation
        event: Dotted event name (e.g., "permission.update")
        description: Human readable summary
        resources: Resources affected by the mutation
        context: Request metadata (location, user agent)
        time: When the mutation was recorded (UTC)
    """

    workspace_id: str
    actor: AuditActor
    event: str
    description: str
    resources: tuple[AuditResource, ...]
    context: AuditContext
    time: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON shape accepted by the ingestion endpoint."""
        return {
            "workspaceId": self.workspace_id,
            "actor": {"type": self.actor.type, "id": self.actor.id},
            "event": self.event,
            "description": self.description,
            "resources": [
                {"type": resource.type, "id": resource.id}
                for resource in self.resources
            ],
            "context": {
                "location": self.context.location,
                "userAgent": self.context.user_agent,
            },
            "time": self.time.isoformat(),
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> AuditLogEntry:
        """Rebuild an entry from its wire form.

        Raises:
            ValueError: If a required field is missing
        """
        try:
            actor = payload["actor"]
            context = payload.get("context") or {}
            return cls(
                workspace_id=payload["workspaceId"],
                actor=AuditActor(type=actor["type"], id=actor["id"]),
                event=payload["event"],
                description=payload["description"],
                resources=tuple(
                    AuditResource(type=resource["type"], id=resource["id"])
                    for resource in payload.get("resources", [])
                ),
                context=AuditContext(
                    location=context.get("location"),
                    user_agent=context.get("userAgent"),
                ),
                time=datetime.fromisoformat(payload["time"]),
            )
        except KeyError as e:
            raise ValueError(f"Audit log payload missing field: {e}") from e
