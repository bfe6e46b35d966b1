"""FastAPI routes for Stock Service"""
from fastapi import APIRouter, Depends, Query, Request
from typing import Optional
import logging

from autoscale.common_errors import INVALID_JSON_MESSAGE, ServiceError, ValidationFailure, guarded, read_json_body
from autoscale.common_pagination import parse_pagination
from autoscale.stock_service.db.store import StockStore, get_store
from autoscale.stock_service.models.schemas import StockEntry, StockListResponse
from autoscale.stock_service.services.stock_service import StockService
from autoscale.stock_service.services.validation import validate_stock_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stock"])


@router.get("/stock", response_model=StockListResponse)
@guarded("Server error: Could not list all stock information.")
async def list_stock(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Items per page"),
    store: StockStore = Depends(get_store),
):
    """List stock levels for all products with pagination"""
    page_request = parse_pagination(page, limit)
    if isinstance(page_request, ServiceError):
        return page_request.to_response()

    entries, pagination = StockService.list_stock(store, page_request)
    return StockListResponse(data=entries, pagination=pagination)


@router.get("/stock/{product_id}", response_model=StockEntry)
@guarded("Server error: Could not fetch stock information.")
async def get_stock(product_id: str, store: StockStore = Depends(get_store)):
    """Get the stock level of a product"""
    entry = StockService.get_stock(store, product_id)
    if isinstance(entry, ServiceError):
        return entry.to_response()
    return entry


@router.put("/stock/{product_id}", response_model=StockEntry)
@guarded("Server error: Could not update stock information.")
async def update_stock(product_id: str, request: Request, store: StockStore = Depends(get_store)):
    """
    Set the stock level of a product

    Expects ``{"quantity": <non-negative integer>}``. Unknown product IDs are
    created rather than rejected.
    """
    payload = await read_json_body(request)
    if payload is None:
        return ValidationFailure(INVALID_JSON_MESSAGE).to_response()

    update = validate_stock_payload(payload)
    if isinstance(update, ServiceError):
        return update.to_response()

    return StockService.set_stock(store, product_id, update)
