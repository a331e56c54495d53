"""
Commerce Backend — User SQLAlchemy Model
=========================================

What:  ORM model representing the `users` table.
Who:   Used by UserService for CRUD operations and by Alembic for schema management.

Table Design:
    - email: Unique index; a duplicate insert raises IntegrityError, which
      UserService turns into ConflictError (HTTP 409)
    - password: Stored exactly as submitted; never serialized in responses
    - name / address: Optional profile fields
"""

from typing import Optional

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import EntityMixin


class User(EntityMixin, Base):
    """A registered customer account."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_users_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
