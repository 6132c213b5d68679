"""SQLAlchemy ORM model for the permissions table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin

if TYPE_CHECKING:
    from iam.infrastructure.models.workspace import WorkspaceModel


class PermissionModel(Base, TimestampMixin):
    """ORM model for permissions table.

    Permission names are unique within a workspace.

    Foreign Key Constraint:
    - workspace_id references workspaces.id with CASCADE delete
    """

    __tablename__ = "permissions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    workspace: Mapped[WorkspaceModel] = relationship(
        "WorkspaceModel",
        back_populates="permissions",
        lazy="raise",
    )

    __table_args__ = (
        UniqueConstraint(
            "workspace_id", "name", name="uq_permissions_workspace_name"
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<PermissionModel(id={self.id}, workspace_id={self.workspace_id}, "
            f"name={self.name})>"
        )
