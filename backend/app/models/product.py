"""
Commerce Backend — Product SQLAlchemy Model
============================================

What:  ORM model representing the `products` table.
Who:   Used by ProductService (CRUD, search, stock adjustment) and by
       OrderService (inventory check on order placement).

Table Design:
    - price: NUMERIC(10, 2), mapped to Decimal; the API serializes it as a
      string so clients never see binary float rounding
    - stock: Integer with a CHECK (stock >= 0) constraint. Application code
      only changes it through a single conditional UPDATE, so the check is
      a backstop, never the primary guard.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, Index, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import EntityMixin


class Product(EntityMixin, Base):
    """A sellable item with an on-hand stock count."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        Index("idx_products_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
