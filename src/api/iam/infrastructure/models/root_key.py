"""SQLAlchemy ORM model for the root_keys table.

The key_hash is the only secret-derived data stored; the plaintext secret
is never persisted.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class RootKeyModel(Base, TimestampMixin):
    """ORM model for root_keys table.

    Notes:
    - prefix (first 12 characters of the secret) is indexed for lookup;
      it is not unique, so lookups verify every candidate's hash
    - key_hash is a bcrypt digest
    - expires_at is optional; NULL means the key never expires
    """

    __tablename__ = "root_keys"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("workspaces.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    key_hash: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    prefix: Mapped[str] = mapped_column(String(12), nullable=False, index=True)
    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    last_used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    is_revoked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<RootKeyModel(id={self.id}, workspace_id={self.workspace_id}, "
            f"prefix={self.prefix}, is_revoked={self.is_revoked})>"
        )
