"""
Commerce Backend — Delivery Service
====================================

What:  Data access for deliveries. Referenced order and courier ids are
       checked on create and update; dates are stored as given.
"""

from typing import Any, Dict

from app.models.delivery import Delivery
from app.services.base import CrudService
from app.services.courier_service import CourierService
from app.services.order_service import OrderService


class DeliveryService(CrudService[Delivery]):
    model = Delivery
    resource = "delivery"

    async def _check_references(self, values: Dict[str, Any]) -> None:
        await self._require(OrderService(self.db), values.get("order_id"))
        await self._require(CourierService(self.db), values.get("courier_id"))
