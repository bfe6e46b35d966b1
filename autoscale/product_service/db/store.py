"""In-memory product store and its request dependency"""
from fastapi import Request
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional
import logging
import uuid

from autoscale.product_service.models.schemas import Product, ProductInput

logger = logging.getLogger(__name__)

_IMAGE_QUERY = "?q=80&w=1974&auto=format&fit=crop"

SAMPLE_PRODUCTS = [
    {
        "name": "Laptop Pro 15 inch",
        "description": "High performance laptop for professionals.",
        "detailed_description": (
            "This 15-inch Laptop Pro features the latest generation processor, a stunning "
            "Retina display, and all-day battery life. Perfect for creative professionals "
            "and developers."
        ),
        "image_url": "https://images.unsplash.com/photo-1611186871348-b1ce696e52c9" + _IMAGE_QUERY,
        "price": 1499.99,
        "stock_quantity": 25,
        "category": "Electronics",
        "age_days": (7, 1),
    },
    {
        "name": "Wireless Mouse Ergo",
        "description": "Ergonomic wireless mouse with long battery life.",
        "image_url": "https://images.unsplash.com/photo-1527814050087-3793815479db" + _IMAGE_QUERY,
        "price": 39.99,
        "stock_quantity": 150,
        "category": "Accessories",
        "age_days": (10, 2),
    },
    {
        "name": "Mechanical Keyboard RGB",
        "description": "RGB backlit mechanical keyboard with blue switches.",
        "image_url": "https://images.unsplash.com/photo-1651168251177-32b5138220dc" + _IMAGE_QUERY,
        "price": 89.9,
        "stock_quantity": 75,
        "category": "Peripherals",
        "age_days": (5, 5),
    },
    {
        "name": "4K UHD Monitor 27 inch",
        "description": "27 inch 4K UHD monitor with vibrant colors.",
        "image_url": "https://images.unsplash.com/photo-1576935429524-1df7fb127097" + _IMAGE_QUERY,
        "price": 349.5,
        "stock_quantity": 40,
        "category": "Monitors",
        "age_days": (15, 3),
    },
    {
        "name": "USB-C Hub 7-in-1",
        "description": "Versatile USB-C hub with multiple ports.",
        "image_url": "https://images.unsplash.com/photo-1548544027-1a96c4c24c7a" + _IMAGE_QUERY,
        "price": 29.99,
        "stock_quantity": 200,
        "category": "Accessories",
        "age_days": (20, 10),
    },
]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductStore:
    """Ordered, process-local collection of products keyed by id"""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: List[Product] = list(products)

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> List[Product]:
        """Snapshot of the collection in insertion order"""
        return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def add(self, data: ProductInput) -> Product:
        """Append a new product with a fresh id and timestamps"""
        now = utcnow()
        product = Product(
            **data.model_dump(),
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
        )
        self._products.append(product)
        return product

    def replace(self, product_id: str, data: ProductInput) -> Optional[Product]:
        """
        Overwrite every mutable field of a product

        id and created_at are kept; updated_at always moves forward, even when
        the clock has not ticked since the previous write.
        """
        for index, current in enumerate(self._products):
            if current.id == product_id:
                updated_at = max(utcnow(), current.updated_at + timedelta(microseconds=1))
                product = Product(
                    **data.model_dump(),
                    id=current.id,
                    created_at=current.created_at,
                    updated_at=updated_at,
                )
                self._products[index] = product
                return product
        return None

    def remove(self, product_id: str) -> bool:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                del self._products[index]
                return True
        return False


def build_sample_products(now: Optional[datetime] = None) -> List[Product]:
    """The five demo products the catalog starts with"""
    now = now or utcnow()
    products = []
    for sample in SAMPLE_PRODUCTS:
        fields: Dict = dict(sample)
        created_days, updated_days = fields.pop("age_days")
        products.append(Product(
            **fields,
            id=str(uuid.uuid4()),
            created_at=now - timedelta(days=created_days),
            updated_at=now - timedelta(days=updated_days),
        ))
    return products


def init_store(seed: bool = True) -> ProductStore:
    """Create the catalog store, optionally seeded with sample products"""
    store = ProductStore(build_sample_products() if seed else ())
    logger.info(f"Product store initialized with {len(store)} products")
    return store


def get_store(request: Request) -> ProductStore:
    """Dependency for getting the app's product store"""
    return request.app.state.product_store
