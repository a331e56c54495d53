"""
Commerce Backend — CRUD Contract Tests (all entities)
======================================================

What:  Behavior every CrudService subclass shares, checked for each of the
       five entities against SQLite.

What we test:
    ✅ update(id, {}) changes nothing but updated_at
    ✅ delete on an unknown id raises NotFoundError and removes nothing
"""

import uuid
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from app.exceptions import NotFoundError
from app.schemas.courier import CourierCreate, CourierUpdate
from app.schemas.delivery import DeliveryCreate, DeliveryUpdate
from app.schemas.order import OrderCreate, OrderUpdate
from app.schemas.product import ProductCreate, ProductUpdate
from app.schemas.user import UserCreate, UserUpdate
from app.services.courier_service import CourierService
from app.services.delivery_service import DeliveryService
from app.services.order_service import OrderService
from app.services.product_service import ProductService
from app.services.user_service import UserService

ENTITIES = [
    pytest.param(
        UserService,
        lambda: UserCreate(email="contract@example.com", password="secret123", name="C"),
        UserUpdate,
        id="user",
    ),
    pytest.param(
        ProductService,
        lambda: ProductCreate(name="Desk Lamp LED", price=Decimal("34.99"), stock=3),
        ProductUpdate,
        id="product",
    ),
    pytest.param(OrderService, lambda: OrderCreate(quantity=2), OrderUpdate, id="order"),
    pytest.param(DeliveryService, lambda: DeliveryCreate(), DeliveryUpdate, id="delivery"),
    pytest.param(
        CourierService,
        lambda: CourierCreate(name="Speedy Sam"),
        CourierUpdate,
        id="courier",
    ),
]


def _columns(record) -> dict:
    return {column.key: getattr(record, column.key) for column in record.__table__.columns}


async def _row_count(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


class TestCrudContract:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls,make_create,update_cls", ENTITIES)
    async def test_empty_update_only_touches_updated_at(
        self, db_session, service_cls, make_create, update_cls
    ):
        service = service_cls(db_session)
        record = await service.create(make_create())
        before = _columns(await service.get_or_404(record.id))

        after = _columns(await service.update(record.id, update_cls()))

        updated_before = before.pop("updated_at")
        updated_after = after.pop("updated_at")
        assert after == before
        assert updated_after >= updated_before

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls,make_create,update_cls", ENTITIES)
    async def test_delete_unknown_id_raises_and_mutates_nothing(
        self, db_session, service_cls, make_create, update_cls
    ):
        service = service_cls(db_session)
        await service.create(make_create())
        count_before = await _row_count(db_session, service.model)

        with pytest.raises(NotFoundError) as exc_info:
            await service.delete(uuid.uuid4())

        assert exc_info.value.resource == service.resource
        assert await _row_count(db_session, service.model) == count_before
