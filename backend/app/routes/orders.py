"""
Commerce Backend — Order Route Handlers
========================================

What:  /api/orders CRUD with user/status filters on the list endpoint.

POST /api/orders runs the inventory check: the response is 201 with the
new order, 404 when the product (or user) does not exist, or 409 with the
requested and available quantities when stock is too low.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_order_service, pagination_params
from app.models.order import OrderStatus
from app.schemas.common import (
    DataResponse,
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginationParams,
)
from app.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from app.services.order_service import OrderService


router = APIRouter(prefix="/api", tags=["Orders"])

_not_found = {404: {"description": "Order not found", "model": ErrorResponse}}


@router.get(
    "/orders",
    response_model=ListResponse[OrderResponse],
    summary="List orders, newest first",
)
async def list_orders(
    user_id: UUID | None = Query(default=None, description="Only orders placed by this user"),
    status: OrderStatus | None = Query(default=None, description="Only orders in this status"),
    pagination: PaginationParams = Depends(pagination_params),
    service: OrderService = Depends(get_order_service),
) -> ListResponse[OrderResponse]:
    orders = await service.list(
        offset=pagination.offset,
        limit=pagination.limit,
        user_id=user_id,
        status=status.value if status else None,
    )
    return ListResponse[OrderResponse](
        data=[OrderResponse.model_validate(order) for order in orders],
        pagination=pagination.meta(),
    )


@router.get(
    "/orders/{order_id}",
    response_model=DataResponse[OrderResponse],
    responses=_not_found,
    summary="Get a single order by ID",
)
async def get_order(
    order_id: UUID,
    service: OrderService = Depends(get_order_service),
) -> DataResponse[OrderResponse]:
    order = await service.get_or_404(order_id)
    return DataResponse[OrderResponse](data=OrderResponse.model_validate(order))


@router.post(
    "/orders",
    status_code=201,
    response_model=DataResponse[OrderResponse],
    responses={
        404: {"description": "Referenced product or user not found", "model": ErrorResponse},
        409: {"description": "Insufficient inventory", "model": ErrorResponse},
    },
    summary="Place an order",
    description=(
        "When product_id and quantity are given, the quantity is deducted from the "
        "product's stock in the same transaction as the insert. Status defaults to PAID."
    ),
)
async def create_order(
    body: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> DataResponse[OrderResponse]:
    order = await service.create(body)
    return DataResponse[OrderResponse](data=OrderResponse.model_validate(order))


@router.put(
    "/orders/{order_id}",
    response_model=DataResponse[OrderResponse],
    responses=_not_found,
    summary="Partially update an order",
)
async def update_order(
    order_id: UUID,
    body: OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> DataResponse[OrderResponse]:
    order = await service.update(order_id, body)
    return DataResponse[OrderResponse](data=OrderResponse.model_validate(order))


@router.delete(
    "/orders/{order_id}",
    response_model=MessageResponse,
    responses=_not_found,
    summary="Delete an order",
)
async def delete_order(
    order_id: UUID,
    service: OrderService = Depends(get_order_service),
) -> MessageResponse:
    await service.delete(order_id)
    return MessageResponse(message="Order deleted successfully")
