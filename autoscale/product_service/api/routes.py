"""FastAPI routes for Product Service"""
from fastapi import APIRouter, Depends, Query, Request, Response, status
from typing import Optional
import logging

from autoscale.common_errors import INVALID_JSON_MESSAGE, ServiceError, ValidationFailure, guarded, read_json_body
from autoscale.common_pagination import parse_pagination
from autoscale.product_service.db.store import ProductStore, get_store
from autoscale.product_service.models.schemas import Product, ProductListResponse
from autoscale.product_service.services.product_service import ProductService
from autoscale.product_service.services.validation import validate_product_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


async def _read_product_payload(request: Request, for_update: bool = False):
    payload = await read_json_body(request)
    if payload is None:
        return ValidationFailure(INVALID_JSON_MESSAGE)
    return validate_product_payload(
        payload,
        require_image_url=request.app.state.settings.require_image_url,
        for_update=for_update,
    )


@router.post(
    "/products",
    response_model=Product,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
@guarded("Server error: Could not add product.")
async def create_product(request: Request, store: ProductStore = Depends(get_store)):
    """Create a new product"""
    product_data = await _read_product_payload(request)
    if isinstance(product_data, ServiceError):
        return product_data.to_response()

    return ProductService.create_product(store, product_data)


@router.get("/products", response_model=ProductListResponse, response_model_exclude_none=True)
@guarded("Server error: Could not list products.")
async def list_products(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Items per page"),
    store: ProductStore = Depends(get_store),
):
    """List products with pagination"""
    page_request = parse_pagination(page, limit)
    if isinstance(page_request, ServiceError):
        return page_request.to_response()

    logger.debug(f"Listing products: page={page_request.page}, limit={page_request.limit}")
    products, pagination = ProductService.get_products(store, page_request)
    return ProductListResponse(data=products, pagination=pagination)


@router.get("/products/{product_id}", response_model=Product, response_model_exclude_none=True)
@guarded("Server error: Could not fetch product.")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    """Get a specific product by ID"""
    product = ProductService.get_product(store, product_id)
    if isinstance(product, ServiceError):
        return product.to_response()
    return product


@router.put("/products/{product_id}", response_model=Product, response_model_exclude_none=True)
@guarded("Server error: Could not update product.")
async def update_product(product_id: str, request: Request, store: ProductStore = Depends(get_store)):
    """Update an existing product"""
    product_data = await _read_product_payload(request, for_update=True)
    if isinstance(product_data, ServiceError):
        return product_data.to_response()

    updated = ProductService.update_product(store, product_id, product_data)
    if isinstance(updated, ServiceError):
        return updated.to_response()
    return updated


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
@guarded("Server error: Could not delete product.")
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    """Delete a product"""
    deleted = ProductService.delete_product(store, product_id)
    if isinstance(deleted, ServiceError):
        return deleted.to_response()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
