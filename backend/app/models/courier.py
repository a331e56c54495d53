"""
Commerce Backend — Courier SQLAlchemy Model
============================================

What:  ORM model representing the `couriers` table.
"""

from typing import Optional

from sqlalchemy import Boolean, Index, String, true
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import EntityMixin


class Courier(EntityMixin, Base):
    __tablename__ = "couriers"

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # Stored as a boolean (0/1 on backends without a native type)
    is_available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    __table_args__ = (
        Index("idx_couriers_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Courier(id={self.id}, name='{self.name}', is_available={self.is_available})>"
