"""
Commerce Backend — Route Dependencies
======================================

What:  FastAPI dependency providers that hand each route its service and
       its validated pagination parameters.
How:   Each provider builds a service around the per-request session from
       get_db_session. Routes declare what they need in their signature:

           async def get_order(order_id: UUID,
                               service: OrderService = Depends(get_order_service)):

       The session dependency is function-scoped: its commit runs when the
       route returns, before the response is sent, so a failed commit
       becomes a 500 instead of a reported success.

       Tests swap implementations with app.dependency_overrides.
"""

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import PaginationParams
from app.services.courier_service import CourierService
from app.services.delivery_service import DeliveryService
from app.services.order_service import OrderService
from app.services.product_service import ProductService
from app.services.user_service import UserService


def pagination_params(
    request: Request,
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int | None = Query(default=None, ge=1, description="Items per page"),
) -> PaginationParams:
    """
    Page/limit from the query string.

    limit defaults to DEFAULT_PAGE_SIZE and is capped at MAX_PAGE_SIZE.
    """
    settings = request.app.state.settings
    if limit is None:
        limit = settings.default_page_size
    return PaginationParams(page=page, limit=min(limit, settings.max_page_size))


def get_user_service(db: AsyncSession = Depends(get_db_session, scope="function")) -> UserService:
    return UserService(db)


def get_product_service(db: AsyncSession = Depends(get_db_session, scope="function")) -> ProductService:
    return ProductService(db)


def get_order_service(db: AsyncSession = Depends(get_db_session, scope="function")) -> OrderService:
    return OrderService(db)


def get_delivery_service(db: AsyncSession = Depends(get_db_session, scope="function")) -> DeliveryService:
    return DeliveryService(db)


def get_courier_service(db: AsyncSession = Depends(get_db_session, scope="function")) -> CourierService:
    return CourierService(db)
