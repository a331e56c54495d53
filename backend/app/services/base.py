"""
Commerce Backend — Generic Data-Access Service
===============================================

What:  The create/get/list/update/delete contract shared by every entity.
How:   Each entity service subclasses CrudService, names its model and
       resource label, and overrides the hooks it needs
       (reference checks, integrity-error translation, extra filters).
Who:   Constructed per request around the request's AsyncSession by the
       dependency providers in app/dependencies.py.

Contract:
    create(data)          → insert, flush, return the new row
    get(id)               → row or None
    get_or_404(id)        → row or NotFoundError
    list(offset, limit)   → rows ordered by created_at DESC, id DESC
    update(id, partial)   → UPDATE of only the sent fields + updated_at,
                            then re-read; NotFoundError if no row matched
    delete(id)            → read, delete, return the pre-delete snapshot

Transactions:
    Services flush but never commit. The session owner (the request
    dependency or Database.session()) commits once at the end, so every
    write made for one request lands or rolls back together.
"""

import logging
import uuid
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import CommerceError, DatabaseError, NotFoundError
from app.models.base import utcnow
from app.schemas.common import PartialUpdate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudService(Generic[ModelT]):
    """Base data-access service for one mapped entity."""

    model: Type[ModelT]
    resource: str = "resource"

    def __init__(self, db: AsyncSession):
        self.db = db

    # ── Reads ─────────────────────────────────────────────────────────────

    async def get(self, record_id: uuid.UUID) -> Optional[ModelT]:
        """
        Fetch one row by primary key.

        populate_existing: a row already in the identity map is refreshed
        from the database, so values written by bulk UPDATEs are visible.
        """
        result = await self.db.execute(
            select(self.model)
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, record_id: uuid.UUID) -> ModelT:
        record = await self.get(record_id)
        if record is None:
            raise NotFoundError(resource=self.resource, resource_id=str(record_id))
        return record

    async def exists(self, record_id: uuid.UUID) -> bool:
        result = await self.db.execute(
            select(self.model.id).where(self.model.id == record_id)
        )
        return result.scalar_one_or_none() is not None

    async def list(self, offset: int = 0, limit: int = 10) -> List[ModelT]:
        return await self._paginate(select(self.model), offset, limit)

    async def _paginate(self, query: Select, offset: int, limit: int) -> List[ModelT]:
        # id DESC breaks created_at ties so repeated calls return the same order
        query = (
            query.order_by(desc(self.model.created_at), desc(self.model.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    # ── Writes ────────────────────────────────────────────────────────────

    async def create(self, data: BaseModel) -> ModelT:
        values = data.model_dump()
        await self._check_references(values)

        record = self.model(**values)
        self.db.add(record)
        await self._flush()

        logger.info("Created %s %s", self.resource, record.id)
        return record

    async def update(self, record_id: uuid.UUID, data: PartialUpdate) -> ModelT:
        """
        Apply only the fields present in `data`.

        The UPDATE statement is assembled from data.changes(): omitted fields
        are not part of the SET clause at all, explicit nulls are. updated_at
        is always refreshed, so an empty body still touches the row.
        """
        changes = data.changes()
        await self._check_references(changes)
        changes["updated_at"] = utcnow()

        statement = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute(statement)
        if result.rowcount == 0:
            raise NotFoundError(resource=self.resource, resource_id=str(record_id))

        logger.info("Updated %s %s: %s", self.resource, record_id, sorted(changes))
        return await self.get_or_404(record_id)

    async def delete(self, record_id: uuid.UUID) -> ModelT:
        record = await self.get_or_404(record_id)
        await self.db.delete(record)
        await self._flush()

        logger.info("Deleted %s %s", self.resource, record_id)
        return record

    # ── Hooks ─────────────────────────────────────────────────────────────

    async def _check_references(self, values: Dict[str, Any]) -> None:
        """Raise NotFoundError when `values` points at a missing row."""
        return None

    def _translate_integrity_error(self, exc: IntegrityError) -> CommerceError:
        logger.error("Integrity error on %s: %s", self.resource, exc.orig)
        return DatabaseError(
            message=f"Could not save the {self.resource}. Please check the submitted data.",
            context={"error_type": type(exc.orig).__name__},
        )

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _require(self, service: "CrudService", record_id: Optional[uuid.UUID]) -> None:
        if record_id is not None and not await service.exists(record_id):
            raise NotFoundError(resource=service.resource, resource_id=str(record_id))

    async def _flush(self) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise self._translate_integrity_error(e) from e

    async def _execute(self, statement):
        try:
            return await self.db.execute(statement)
        except IntegrityError as e:
            raise self._translate_integrity_error(e) from e
