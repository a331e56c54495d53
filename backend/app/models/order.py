"""
Commerce Backend — Order SQLAlchemy Model
==========================================

What:  ORM model representing the `orders` table.
Who:   Used by OrderService.

Table Design:
    - user_id / product_id: Nullable foreign keys with ON DELETE SET NULL.
      Deleting a user or product keeps its order history; the reference
      becomes NULL. OrderService also checks referenced rows on write.
    - quantity: Units ordered; checked against Product.stock on creation
    - status: One of OrderStatus; defaults to PAID
"""

import enum
import uuid
from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import EntityMixin


class OrderStatus(str, enum.Enum):
    PAID = "PAID"
    IN_TRANSIT = "IN TRANSIT"
    DELIVERED = "DELIVERED"


class Order(EntityMixin, Base):
    """A purchase of some quantity of one product by one user."""

    __tablename__ = "orders"

    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    product_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
    )
    quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=OrderStatus.PAID.value,
        server_default=text("'PAID'"),
    )

    __table_args__ = (
        Index("idx_orders_created_at", "created_at"),
        Index("idx_orders_user_id", "user_id"),
        Index("idx_orders_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status='{self.status}', quantity={self.quantity})>"
