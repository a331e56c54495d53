"""
Commerce Backend — Delivery SQLAlchemy Model
=============================================

What:  ORM model representing the `deliveries` table.

No state machine is enforced: pick_up_date and delivered_date can be set
or cleared in any order.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import EntityMixin


class Delivery(EntityMixin, Base):
    """Hand-off of one order to one courier."""

    __tablename__ = "deliveries"

    order_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("orders.id", ondelete="SET NULL"),
        nullable=True,
    )
    courier_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("couriers.id", ondelete="SET NULL"),
        nullable=True,
    )
    pick_up_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    delivered_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("idx_deliveries_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Delivery(id={self.id}, order_id={self.order_id}, courier_id={self.courier_id})>"
