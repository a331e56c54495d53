"""
Commerce Backend — Delivery Schemas
====================================

What:  Request/response models for /api/deliveries. Every field is
       optional and nullable; dates may be set in any order.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import PartialUpdate


class DeliveryCreate(BaseModel):
    order_id: Optional[uuid.UUID] = None
    courier_id: Optional[uuid.UUID] = None
    pick_up_date: Optional[datetime] = None
    delivered_date: Optional[datetime] = None


class DeliveryUpdate(PartialUpdate):
    order_id: Optional[uuid.UUID] = None
    courier_id: Optional[uuid.UUID] = None
    pick_up_date: Optional[datetime] = None
    delivered_date: Optional[datetime] = None


class DeliveryResponse(BaseModel):
    id: uuid.UUID
    order_id: Optional[uuid.UUID] = None
    courier_id: Optional[uuid.UUID] = None
    pick_up_date: Optional[datetime] = None
    delivered_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
