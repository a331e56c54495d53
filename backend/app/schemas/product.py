"""
Commerce Backend — Product Schemas
===================================

What:  Request/response models for /api/products.

Price handling:
    Input accepts a JSON number or string; both are parsed into Decimal.
    Output serializes price as a string ("1299.99") so clients never see
    float rounding artefacts.

Stock handling:
    Stock is set on create. Afterwards it only moves through
    POST /api/products/{id}/stock (StockAdjustment) and order placement;
    ProductUpdate deliberately has no stock field.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from app.schemas.common import PartialUpdate


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255, examples=["Wireless Mouse"])
    description: Optional[str] = Field(
        default=None,
        examples=["Ergonomic wireless mouse with precision tracking"],
    )
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2, examples=["29.99"])
    stock: int = Field(default=0, ge=0, description="Initial stock quantity")


class ProductUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"name", "price"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class StockAdjustment(BaseModel):
    """Signed change applied to stock; negative values consume inventory."""
    delta: int = Field(description="Units to add (positive) or remove (negative)", examples=[5, -2])


class ProductResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    price: Decimal = Field(description="Decimal price, serialized as a string")
    stock: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
