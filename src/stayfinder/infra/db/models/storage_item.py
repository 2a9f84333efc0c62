from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from stayfinder.infra.db.models.base import Base


class StorageItemRow(Base):
    """One key of the origin-scoped key/value namespace."""

    __tablename__ = "storage_items"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    # Bumped on every write and removal; never restarts for a key
    revision: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    written_by: Mapped[str] = mapped_column(String(64), nullable=False)

    # Removed keys stay as tombstones so their revision keeps growing
    deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
