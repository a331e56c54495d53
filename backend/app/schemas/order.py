"""
Commerce Backend — Order Schemas
=================================

What:  Request/response models for /api/orders.

status is transported as the plain string value ("PAID", "IN TRANSIT",
"DELIVERED"); use_enum_values keeps it a str all the way to the ORM.
"""

import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from app.models.order import OrderStatus
from app.schemas.common import PartialUpdate


class OrderCreate(BaseModel):
    user_id: Optional[uuid.UUID] = Field(default=None, description="Ordering user")
    product_id: Optional[uuid.UUID] = Field(default=None, description="Ordered product")
    quantity: Optional[int] = Field(
        default=None,
        ge=1,
        description="Units ordered; checked against and deducted from product stock",
    )
    status: OrderStatus = Field(default=OrderStatus.PAID, validate_default=True)

    model_config = {"use_enum_values": True}


class OrderUpdate(PartialUpdate):
    """
    Partial order update. Changing product_id or quantity here does not
    move stock; inventory is only consumed at placement.
    """
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"status"})

    user_id: Optional[uuid.UUID] = None
    product_id: Optional[uuid.UUID] = None
    quantity: Optional[int] = Field(default=None, ge=1)
    status: Optional[OrderStatus] = None

    model_config = {"extra": "forbid", "use_enum_values": True}


class OrderResponse(BaseModel):
    id: uuid.UUID
    user_id: Optional[uuid.UUID] = None
    product_id: Optional[uuid.UUID] = None
    quantity: Optional[int] = None
    status: OrderStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
