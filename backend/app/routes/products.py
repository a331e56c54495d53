"""
Commerce Backend — Product Route Handlers
==========================================

What:  /api/products CRUD, search, and the stock adjustment endpoint.

Route Inventory:
    GET    /api/products?page=&limit=&search=   list / search
    GET    /api/products/{id}                   detail
    POST   /api/products                        create (201)
    PUT    /api/products/{id}                   partial update (no stock)
    DELETE /api/products/{id}                   delete
    POST   /api/products/{id}/stock             atomic stock +/- delta
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_product_service, pagination_params
from app.schemas.common import (
    DataResponse,
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginationParams,
)
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate, StockAdjustment
from app.services.product_service import ProductService


router = APIRouter(prefix="/api", tags=["Products"])

_not_found = {404: {"description": "Product not found", "model": ErrorResponse}}


@router.get(
    "/products",
    response_model=ListResponse[ProductResponse],
    summary="List or search products, newest first",
    description=(
        "`search` matches case-insensitively against product name and description "
        "(substring match)."
    ),
)
async def list_products(
    search: str | None = Query(default=None, max_length=255, description="Search term"),
    pagination: PaginationParams = Depends(pagination_params),
    service: ProductService = Depends(get_product_service),
) -> ListResponse[ProductResponse]:
    products = await service.list(
        offset=pagination.offset,
        limit=pagination.limit,
        search=search,
    )
    return ListResponse[ProductResponse](
        data=[ProductResponse.model_validate(product) for product in products],
        pagination=pagination.meta(),
    )


@router.get(
    "/products/{product_id}",
    response_model=DataResponse[ProductResponse],
    responses=_not_found,
    summary="Get a single product by ID",
)
async def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> DataResponse[ProductResponse]:
    product = await service.get_or_404(product_id)
    return DataResponse[ProductResponse](data=ProductResponse.model_validate(product))


@router.post(
    "/products",
    status_code=201,
    response_model=DataResponse[ProductResponse],
    summary="Create a product",
)
async def create_product(
    body: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> DataResponse[ProductResponse]:
    product = await service.create(body)
    return DataResponse[ProductResponse](data=ProductResponse.model_validate(product))


@router.put(
    "/products/{product_id}",
    response_model=DataResponse[ProductResponse],
    responses=_not_found,
    summary="Partially update a product",
    description="Only the fields present in the body are changed. Stock is adjusted via /stock.",
)
async def update_product(
    product_id: UUID,
    body: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> DataResponse[ProductResponse]:
    product = await service.update(product_id, body)
    return DataResponse[ProductResponse](data=ProductResponse.model_validate(product))


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    responses=_not_found,
    summary="Delete a product",
)
async def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    await service.delete(product_id)
    return MessageResponse(message="Product deleted successfully")


@router.post(
    "/products/{product_id}/stock",
    response_model=DataResponse[ProductResponse],
    responses={
        **_not_found,
        409: {"description": "Stock would become negative", "model": ErrorResponse},
    },
    summary="Increment or decrement product stock",
)
async def adjust_stock(
    product_id: UUID,
    body: StockAdjustment,
    service: ProductService = Depends(get_product_service),
) -> DataResponse[ProductResponse]:
    product = await service.adjust_stock(product_id, body.delta)
    return DataResponse[ProductResponse](data=ProductResponse.model_validate(product))
