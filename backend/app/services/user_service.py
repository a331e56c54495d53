"""
Commerce Backend — User Service
================================

What:  Data access for users.
How:   Generic CRUD from CrudService; the unique index on email is the
       source of truth for duplicates. The IntegrityError it raises on
       flush/UPDATE is translated into ConflictError (HTTP 409).
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.exceptions import CommerceError, ConflictError
from app.models.user import User
from app.services.base import CrudService

logger = logging.getLogger(__name__)


class UserService(CrudService[User]):
    model = User
    resource = "user"

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    def _translate_integrity_error(self, exc: IntegrityError) -> CommerceError:
        logger.warning("Rejected duplicate user email: %s", exc.orig)
        return ConflictError(message="A user with this email already exists", field="email")
