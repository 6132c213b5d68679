"""SQLAlchemy ORM model for the apis table."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ApiModel(Base, TimestampMixin):
    """ORM model for apis table.

    Apis are provisioned outside this service and only read here.
    key_auth_id links an Api to the rows of the keys table it owns.
    workspace_id is not a foreign key; workspaces belong to the IAM context.
    """

    __tablename__ = "apis"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(String(64), nullable=False)
    key_auth_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(512), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (Index("idx_apis_workspace_id", "workspace_id"),)

    def __repr__(self) -> str:
        return (
            f"<ApiModel(id={self.id}, workspace_id={self.workspace_id}, "
            f"key_auth_id={self.key_auth_id}, deleted_at={self.deleted_at})>"
        )
