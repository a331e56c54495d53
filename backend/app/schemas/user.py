"""
Commerce Backend — User Schemas
================================

What:  Request/response models for /api/users.

The password is accepted on create and update but never appears in
UserResponse.
"""

import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, EmailStr, Field

from app.schemas.common import PartialUpdate


class UserCreate(BaseModel):
    email: EmailStr = Field(description="User email address", examples=["newuser@example.com"])
    password: str = Field(
        min_length=6,
        max_length=255,
        description="User password (minimum 6 characters)",
        examples=["securePassword123"],
    )
    name: Optional[str] = Field(default=None, max_length=255, examples=["Jane Smith"])
    address: Optional[str] = Field(default=None, examples=["221B Baker Street, London"])


class UserUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"email", "password"})

    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = None


class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    name: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
