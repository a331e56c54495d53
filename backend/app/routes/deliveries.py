"""Commerce Backend — Delivery Route Handlers (/api/deliveries)."""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.dependencies import get_delivery_service, pagination_params
from app.schemas.common import (
    DataResponse,
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginationParams,
)
from app.schemas.delivery import DeliveryCreate, DeliveryResponse, DeliveryUpdate
from app.services.delivery_service import DeliveryService


router = APIRouter(prefix="/api", tags=["Deliveries"])

_not_found = {404: {"description": "Delivery not found", "model": ErrorResponse}}


@router.get("/deliveries", response_model=ListResponse[DeliveryResponse], summary="List deliveries")
async def list_deliveries(
    pagination: PaginationParams = Depends(pagination_params),
    service: DeliveryService = Depends(get_delivery_service),
) -> ListResponse[DeliveryResponse]:
    deliveries = await service.list(offset=pagination.offset, limit=pagination.limit)
    return ListResponse[DeliveryResponse](
        data=[DeliveryResponse.model_validate(delivery) for delivery in deliveries],
        pagination=pagination.meta(),
    )


@router.get(
    "/deliveries/{delivery_id}",
    response_model=DataResponse[DeliveryResponse],
    responses=_not_found,
    summary="Get a single delivery by ID",
)
async def get_delivery(
    delivery_id: UUID,
    service: DeliveryService = Depends(get_delivery_service),
) -> DataResponse[DeliveryResponse]:
    delivery = await service.get_or_404(delivery_id)
    return DataResponse[DeliveryResponse](data=DeliveryResponse.model_validate(delivery))


@router.post(
    "/deliveries",
    status_code=201,
    response_model=DataResponse[DeliveryResponse],
    responses={404: {"description": "Referenced order or courier not found", "model": ErrorResponse}},
    summary="Create a delivery",
)
async def create_delivery(
    body: DeliveryCreate,
    service: DeliveryService = Depends(get_delivery_service),
) -> DataResponse[DeliveryResponse]:
    delivery = await service.create(body)
    return DataResponse[DeliveryResponse](data=DeliveryResponse.model_validate(delivery))


@router.put(
    "/deliveries/{delivery_id}",
    response_model=DataResponse[DeliveryResponse],
    responses=_not_found,
    summary="Partially update a delivery",
)
async def update_delivery(
    delivery_id: UUID,
    body: DeliveryUpdate,
    service: DeliveryService = Depends(get_delivery_service),
) -> DataResponse[DeliveryResponse]:
    delivery = await service.update(delivery_id, body)
    return DataResponse[DeliveryResponse](data=DeliveryResponse.model_validate(delivery))


@router.delete(
    "/deliveries/{delivery_id}",
    response_model=MessageResponse,
    responses=_not_found,
    summary="Delete a delivery",
)
async def delete_delivery(
    delivery_id: UUID,
    service: DeliveryService = Depends(get_delivery_service),
) -> MessageResponse:
    await service.delete(delivery_id)
    return MessageResponse(message="Delivery deleted successfully")
