# autoscale/stock_service/models/schemas.py
"""
Pydantic schemas for stock levels
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List
from datetime import datetime

from autoscale.common_pagination import PaginationInfo


class StockEntry(BaseModel):
    """Quantity on hand for one product"""
    product_id: str = Field(..., description="Product identifier")
    quantity: int = Field(..., ge=0, description="Units in stock")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StockUpdate(BaseModel):
    """Validated body of a stock update"""
    quantity: int = Field(..., ge=0)


class StockListResponse(BaseModel):
    """A page of stock entries"""
    data: List[StockEntry]
    pagination: PaginationInfo


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    version: str
    timestamp: datetime
