"""
Commerce Backend — Product Service
===================================

What:  Data access for products: CRUD, name/description search and the
       atomic stock adjustment used by order placement.

Stock adjustment:
    UPDATE products
       SET stock = stock + :delta, updated_at = :now
     WHERE id = :id AND stock + :delta >= 0

    The arithmetic and the guard run inside the database in one statement,
    so two concurrent callers can never both see the same stock and
    jointly drive it negative. Zero affected rows means either the product
    is missing (ProductNotFoundError) or the guard failed
    (InsufficientInventoryError, carrying requested and available).
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import or_, select, update

from app.exceptions import InsufficientInventoryError, ProductNotFoundError, ValidationError
from app.models.base import utcnow
from app.models.product import Product
from app.services.base import CrudService

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    """Substring pattern with LIKE wildcards in the term taken literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ProductService(CrudService[Product]):
    model = Product
    resource = "product"

    async def list(
        self,
        offset: int = 0,
        limit: int = 10,
        search: Optional[str] = None,
    ) -> List[Product]:
        """
        List products, newest first.

        search: case-insensitive substring match against name or description.
        """
        query = select(Product)
        if search:
            pattern = _like_pattern(search)
            query = query.where(
                or_(
                    Product.name.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )
        return await self._paginate(query, offset, limit)

    async def adjust_stock(self, product_id: uuid.UUID, delta: int) -> Product:
        """
        Add `delta` to stock (negative consumes) without ever going below zero.

        Raises:
            ProductNotFoundError: No product with this id
            ValidationError: delta is zero
            InsufficientInventoryError: stock + delta would be negative
        """
        if delta == 0:
            raise ValidationError(message="Stock delta must be non-zero", field="delta")

        result = await self.db.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock + delta >= 0)
            .values(stock=Product.stock + delta, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            product = await self.get(product_id)
            if product is None:
                raise ProductNotFoundError(product_id=str(product_id))
            logger.warning(
                "Stock change rejected for product %s: requested %d, available %d",
                product_id,
                -delta,
                product.stock,
            )
            raise InsufficientInventoryError(
                product_id=str(product_id),
                requested=-delta,
                available=product.stock,
            )

        product = await self.get_or_404(product_id)
        logger.info("Stock for product %s changed by %+d (now %d)", product_id, delta, product.stock)
        return product

    async def reserve(self, product_id: uuid.UUID, quantity: int) -> Product:
        """Consume `quantity` units for an order."""
        return await self.adjust_stock(product_id, -quantity)
