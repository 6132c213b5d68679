"""SQLAlchemy ORM model for the workspaces table."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin

if TYPE_CHECKING:
    from iam.infrastructure.models.permission import PermissionModel


class WorkspaceModel(Base, TimestampMixin):
    """ORM model for workspaces table.

    Workspaces are provisioned outside this service and only read here.
    Soft deletion sets deleted_at; such rows are never resolved.

    Relationships:
    - permissions is lazy="raise": it must be loaded explicitly (with the
      lookup's filter applied) so no query ever loads a full permission set
      by accident.
    """

    __tablename__ = "workspaces"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    permissions: Mapped[list[PermissionModel]] = relationship(
        "PermissionModel",
        back_populates="workspace",
        lazy="raise",
    )

    __table_args__ = (Index("idx_workspaces_tenant_id", "tenant_id"),)

    def __repr__(self) -> str:
        return (
            f"<WorkspaceModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"name={self.name}, deleted_at={self.deleted_at})>"
        )
