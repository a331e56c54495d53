"""Commerce Backend — Courier Schemas."""

import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from app.schemas.common import PartialUpdate


class CourierCreate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255, examples=["Speedy Sam"])
    is_available: bool = Field(default=True, description="Whether the courier can take a delivery")


class CourierUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"is_available"})

    name: Optional[str] = Field(default=None, max_length=255)
    is_available: Optional[bool] = None


class CourierResponse(BaseModel):
    id: uuid.UUID
    name: Optional[str] = None
    is_available: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
