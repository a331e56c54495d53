# Models package init
# Importing this package registers every table with Base.metadata, which
# create_all() and Alembic autogenerate rely on (foreign keys span tables).
from app.models.courier import Courier
from app.models.delivery import Delivery
from app.models.order import Order, OrderStatus
from app.models.product import Product
from app.models.user import User

__all__ = ["Courier", "Delivery", "Order", "OrderStatus", "Product", "User"]
