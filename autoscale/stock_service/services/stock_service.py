"""Stock level business logic"""
from typing import List, Tuple, Union
from opentelemetry import trace
import logging

from autoscale.common_errors import NotFound
from autoscale.common_pagination import PageRequest, PaginationInfo, paginate
from autoscale.stock_service.db.store import StockStore
from autoscale.stock_service.models.schemas import StockEntry, StockUpdate

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class StockService:
    """Stock service for business logic"""

    @staticmethod
    def get_stock(store: StockStore, product_id: str) -> Union[StockEntry, NotFound]:
        """Get the stock level of one product"""
        with tracer.start_as_current_span("get_stock") as span:
            span.set_attribute("product.id", product_id)
            quantity = store.get(product_id)
            if quantity is None:
                return NotFound(f"Stock information not found for product ID: {product_id}")
            return StockEntry(product_id=product_id, quantity=quantity)

    @staticmethod
    def list_stock(store: StockStore, page: PageRequest) -> Tuple[List[StockEntry], PaginationInfo]:
        """Get one page of stock entries, in insertion order"""
        with tracer.start_as_current_span("list_stock") as span:
            span.set_attribute("pagination.page", page.page)
            span.set_attribute("pagination.limit", page.limit)
            return paginate(store.entries(), page)

    @staticmethod
    def set_stock(store: StockStore, product_id: str, update: StockUpdate) -> StockEntry:
        """
        Upsert the stock level of a product

        Unknown product IDs are accepted and start being tracked.
        """
        with tracer.start_as_current_span("set_stock") as span:
            span.set_attribute("product.id", product_id)
            span.set_attribute("stock.quantity", update.quantity)
            created = store.get(product_id) is None
            entry = store.set(product_id, update.quantity)
            action = "created" if created else "updated"
            logger.info(f"Stock {action} for product ID {product_id}: quantity={entry.quantity}")
            return entry
