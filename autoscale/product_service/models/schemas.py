# autoscale/product_service/models/schemas.py
"""
Pydantic schemas for the product catalog

Attributes are snake_case; the wire format is camelCase (``stockQuantity``,
``imageUrl``, ``createdAt``...).
"""
from pydantic import BaseModel, Field, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union
from datetime import datetime, timezone

from autoscale.common_pagination import PaginationInfo


class CamelModel(BaseModel):
    """Base model serialised with camelCase field names"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductInput(CamelModel):
    """Validated body of a create or update request"""
    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field(..., min_length=1, description="Short product description")
    detailed_description: Optional[str] = Field(None, description="Long-form description")
    image_url: Optional[str] = Field(None, description="Product image URL")
    price: float = Field(..., description="Unit price")
    stock_quantity: Union[int, float] = Field(..., description="Units in stock")
    category: str = Field(..., min_length=1, description="Product category")


class Product(ProductInput):
    """A product held by the catalog"""
    id: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        # Fixed-width UTC timestamps sort lexically
        return value.astimezone(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


class ProductListResponse(BaseModel):
    """A page of products"""
    data: List[Product]
    pagination: PaginationInfo


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    version: str
    timestamp: datetime
