"""
Commerce Backend — Order Service (Inventory-Aware Placement)
=============================================================

What:  Data access for orders, including the one cross-entity operation:
       placing an order validates and consumes product stock.

Placement Flow (POST /api/orders):
    ┌──────────────┐    ┌────────────────────────────┐    ┌──────────────┐
    │ check user   │───▶│ conditional stock decrement │───▶│ insert order │
    │ (if given)   │    │ (ProductService.reserve)    │    │ status=PAID  │
    └──────────────┘    └────────────────────────────┘    └──────────────┘

    Failure at any step raises before the insert:
    - user missing          → NotFoundError               (404)
    - product missing       → ProductNotFoundError        (404)
    - quantity > stock      → InsufficientInventoryError  (409)

    All steps share the request session. If the insert fails after the
    decrement, the session rollback restores the stock.

Update and delete never move stock.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from app.exceptions import ProductNotFoundError
from app.models.order import Order
from app.schemas.order import OrderCreate
from app.services.base import CrudService
from app.services.product_service import ProductService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class OrderService(CrudService[Order]):
    model = Order
    resource = "order"

    async def create(self, data: OrderCreate) -> Order:
        values = data.model_dump()

        await self._require(UserService(self.db), values.get("user_id"))

        product_id = values.get("product_id")
        quantity = values.get("quantity")
        products = ProductService(self.db)
        if product_id is not None:
            if quantity is not None:
                await products.reserve(product_id, quantity)
            elif not await products.exists(product_id):
                raise ProductNotFoundError(product_id=str(product_id))

        order = Order(**values)
        self.db.add(order)
        await self._flush()

        logger.info(
            "Placed order %s: product=%s quantity=%s status=%s",
            order.id,
            product_id,
            quantity,
            order.status,
        )
        return order

    async def list(
        self,
        offset: int = 0,
        limit: int = 10,
        user_id: Optional[uuid.UUID] = None,
        status: Optional[str] = None,
    ) -> List[Order]:
        query = select(Order)
        if user_id is not None:
            query = query.where(Order.user_id == user_id)
        if status is not None:
            query = query.where(Order.status == status)
        return await self._paginate(query, offset, limit)

    async def list_by_user(self, user_id: uuid.UUID, offset: int = 0, limit: int = 10) -> List[Order]:
        await UserService(self.db).get_or_404(user_id)
        return await self.list(offset=offset, limit=limit, user_id=user_id)

    async def _check_references(self, values: Dict[str, Any]) -> None:
        await self._require(UserService(self.db), values.get("user_id"))
        await self._require(ProductService(self.db), values.get("product_id"))
