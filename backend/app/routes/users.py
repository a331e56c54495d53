"""
Commerce Backend — User Route Handlers
=======================================

What:  /api/users CRUD plus GET /api/users/{id}/orders.
How:   Pydantic validates bodies and params; the handler calls UserService
       and wraps the result in the success envelope. Known failures
       (NotFoundError, ConflictError) propagate to the global handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.dependencies import get_order_service, get_user_service, pagination_params
from app.schemas.common import (
    DataResponse,
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginationParams,
)
from app.schemas.order import OrderResponse
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.order_service import OrderService
from app.services.user_service import UserService


router = APIRouter(prefix="/api", tags=["Users"])

_not_found = {404: {"description": "User not found", "model": ErrorResponse}}


@router.get(
    "/users",
    response_model=ListResponse[UserResponse],
    summary="List users, newest first",
)
async def list_users(
    pagination: PaginationParams = Depends(pagination_params),
    service: UserService = Depends(get_user_service),
) -> ListResponse[UserResponse]:
    users = await service.list(offset=pagination.offset, limit=pagination.limit)
    return ListResponse[UserResponse](
        data=[UserResponse.model_validate(user) for user in users],
        pagination=pagination.meta(),
    )


@router.get(
    "/users/{user_id}",
    response_model=DataResponse[UserResponse],
    responses=_not_found,
    summary="Get a single user by ID",
)
async def get_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> DataResponse[UserResponse]:
    user = await service.get_or_404(user_id)
    return DataResponse[UserResponse](data=UserResponse.model_validate(user))


@router.post(
    "/users",
    status_code=201,
    response_model=DataResponse[UserResponse],
    responses={409: {"description": "Email already registered", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    body: UserCreate,
    service: UserService = Depends(get_user_service),
) -> DataResponse[UserResponse]:
    user = await service.create(body)
    return DataResponse[UserResponse](data=UserResponse.model_validate(user))


@router.put(
    "/users/{user_id}",
    response_model=DataResponse[UserResponse],
    responses={
        **_not_found,
        409: {"description": "Email already registered", "model": ErrorResponse},
    },
    summary="Partially update a user",
    description="Only the fields present in the body are changed.",
)
async def update_user(
    user_id: UUID,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> DataResponse[UserResponse]:
    user = await service.update(user_id, body)
    return DataResponse[UserResponse](data=UserResponse.model_validate(user))


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    responses=_not_found,
    summary="Delete a user",
)
async def delete_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await service.delete(user_id)
    return MessageResponse(message="User deleted successfully")


@router.get(
    "/users/{user_id}/orders",
    response_model=ListResponse[OrderResponse],
    responses=_not_found,
    summary="List a user's orders, newest first",
)
async def list_user_orders(
    user_id: UUID,
    pagination: PaginationParams = Depends(pagination_params),
    service: OrderService = Depends(get_order_service),
) -> ListResponse[OrderResponse]:
    orders = await service.list_by_user(user_id, offset=pagination.offset, limit=pagination.limit)
    return ListResponse[OrderResponse](
        data=[OrderResponse.model_validate(order) for order in orders],
        pagination=pagination.meta(),
    )
