"""SQLAlchemy ORM model for the keys table.

hash is never selected into domain objects; start is the only
secret-derived value that leaves this layer.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class KeyModel(Base, TimestampMixin):
    """ORM model for keys table.

    Listing index covers the keyring, workspace and the created_at/id order
    used for paging.
    """

    __tablename__ = "keys"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    key_auth_id: Mapped[str] = mapped_column(String(64), nullable=False)
    workspace_id: Mapped[str] = mapped_column(String(64), nullable=False)
    hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    start: Mapped[str] = mapped_column(String(16), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index(
            "idx_keys_listing",
            "key_auth_id",
            "workspace_id",
            "created_at",
            "id",
        ),
        Index("idx_keys_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<KeyModel(id={self.id}, key_auth_id={self.key_auth_id}, "
            f"workspace_id={self.workspace_id}, owner_id={self.owner_id})>"
        )
