"""Commerce Backend — Courier Route Handlers (/api/couriers)."""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.dependencies import get_courier_service, pagination_params
from app.schemas.common import (
    DataResponse,
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginationParams,
)
from app.schemas.courier import CourierCreate, CourierResponse, CourierUpdate
from app.services.courier_service import CourierService


router = APIRouter(prefix="/api", tags=["Couriers"])

_not_found = {404: {"description": "Courier not found", "model": ErrorResponse}}


@router.get("/couriers", response_model=ListResponse[CourierResponse], summary="List couriers")
async def list_couriers(
    pagination: PaginationParams = Depends(pagination_params),
    service: CourierService = Depends(get_courier_service),
) -> ListResponse[CourierResponse]:
    couriers = await service.list(offset=pagination.offset, limit=pagination.limit)
    return ListResponse[CourierResponse](
        data=[CourierResponse.model_validate(courier) for courier in couriers],
        pagination=pagination.meta(),
    )


@router.get(
    "/couriers/{courier_id}",
    response_model=DataResponse[CourierResponse],
    responses=_not_found,
    summary="Get a single courier by ID",
)
async def get_courier(
    courier_id: UUID,
    service: CourierService = Depends(get_courier_service),
) -> DataResponse[CourierResponse]:
    courier = await service.get_or_404(courier_id)
    return DataResponse[CourierResponse](data=CourierResponse.model_validate(courier))


@router.post(
    "/couriers",
    status_code=201,
    response_model=DataResponse[CourierResponse],
    summary="Create a courier",
)
async def create_courier(
    body: CourierCreate,
    service: CourierService = Depends(get_courier_service),
) -> DataResponse[CourierResponse]:
    courier = await service.create(body)
    return DataResponse[CourierResponse](data=CourierResponse.model_validate(courier))


@router.put(
    "/couriers/{courier_id}",
    response_model=DataResponse[CourierResponse],
    responses=_not_found,
    summary="Partially update a courier",
)
async def update_courier(
    courier_id: UUID,
    body: CourierUpdate,
    service: CourierService = Depends(get_courier_service),
) -> DataResponse[CourierResponse]:
    courier = await service.update(courier_id, body)
    return DataResponse[CourierResponse](data=CourierResponse.model_validate(courier))


@router.delete(
    "/couriers/{courier_id}",
    response_model=MessageResponse,
    responses=_not_found,
    summary="Delete a courier",
)
async def delete_courier(
    courier_id: UUID,
    service: CourierService = Depends(get_courier_service),
) -> MessageResponse:
    await service.delete(courier_id)
    return MessageResponse(message="Courier deleted successfully")
