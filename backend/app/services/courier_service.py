"""Commerce Backend — Courier Service."""

from app.models.courier import Courier
from app.services.base import CrudService


class CourierService(CrudService[Courier]):
    model = Courier
    resource = "courier"
