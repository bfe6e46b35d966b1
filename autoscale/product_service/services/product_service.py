"""Product business logic"""
from typing import List, Tuple, Union
from opentelemetry import trace
import logging

from autoscale.common_errors import NotFound
from autoscale.common_pagination import PageRequest, PaginationInfo, paginate
from autoscale.product_service.db.store import ProductStore
from autoscale.product_service.models.schemas import Product, ProductInput

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class ProductService:
    """Product service for business logic"""

    @staticmethod
    def get_product(store: ProductStore, product_id: str) -> Union[Product, NotFound]:
        """Get product by ID"""
        with tracer.start_as_current_span("get_product") as span:
            span.set_attribute("product.id", product_id)
            product = store.get(product_id)
            if product is None:
                return NotFound(f"Product with id '{product_id}' not found.")
            return product

    @staticmethod
    def get_products(store: ProductStore, page: PageRequest) -> Tuple[List[Product], PaginationInfo]:
        """Get one page of products"""
        with tracer.start_as_current_span("get_products") as span:
            span.set_attribute("pagination.page", page.page)
            span.set_attribute("pagination.limit", page.limit)
            return paginate(store.all(), page)

    @staticmethod
    def create_product(store: ProductStore, product_data: ProductInput) -> Product:
        """Create new product"""
        with tracer.start_as_current_span("create_product"):
            product = store.add(product_data)
            logger.info(f"Product created: {product.id} ({product.name})")
            return product

    @staticmethod
    def update_product(store: ProductStore, product_id: str, product_data: ProductInput) -> Union[Product, NotFound]:
        """Replace every mutable field of an existing product"""
        with tracer.start_as_current_span("update_product") as span:
            span.set_attribute("product.id", product_id)
            product = store.replace(product_id, product_data)
            if product is None:
                return NotFound(f"Product with id '{product_id}' not found, cannot update.")
            logger.info(f"Product updated: {product.id}")
            return product

    @staticmethod
    def delete_product(store: ProductStore, product_id: str) -> Union[bool, NotFound]:
        """Delete product"""
        with tracer.start_as_current_span("delete_product") as span:
            span.set_attribute("product.id", product_id)
            if not store.remove(product_id):
                return NotFound(f"Product with id '{product_id}' not found, cannot delete.")
            logger.info(f"Product deleted: {product_id}")
            return True
