"""In-memory stock levels and their request dependency"""
from fastapi import Request
from typing import Dict, List, Optional
import logging

from autoscale.stock_service.models.schemas import StockEntry

logger = logging.getLogger(__name__)

SAMPLE_STOCK_LEVELS = {
    "71cb9bea-6e6e-42d5-a191-e28ad09b1e7b": 25,  # Laptop Pro 15 inch
    "1fa7b950-5b2f-4742-a995-17c99022dc12": 150,  # Wireless Mouse Ergo
}


class StockStore:
    """productId -> quantity map; iteration follows insertion order"""

    def __init__(self, levels: Optional[Dict[str, int]] = None):
        self._levels: Dict[str, int] = dict(levels or {})

    def __len__(self) -> int:
        return len(self._levels)

    def get(self, product_id: str) -> Optional[int]:
        return self._levels.get(product_id)

    def set(self, product_id: str, quantity: int) -> StockEntry:
        """Insert or overwrite the quantity for a product"""
        self._levels[product_id] = quantity
        return StockEntry(product_id=product_id, quantity=quantity)

    def entries(self) -> List[StockEntry]:
        return [
            StockEntry(product_id=product_id, quantity=quantity)
            for product_id, quantity in self._levels.items()
        ]


def init_store(seed: bool = True) -> StockStore:
    """Create the stock store, optionally seeded with sample levels"""
    store = StockStore(SAMPLE_STOCK_LEVELS if seed else None)
    logger.info(f"Stock store initialized with {len(store)} entries")
    return store


def get_store(request: Request) -> StockStore:
    """Dependency for getting the app's stock store"""
    return request.app.state.stock_store
