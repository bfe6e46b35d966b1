import pytest
from fastapi.testclient import TestClient

from autoscale.product_service.config import Settings as ProductSettings
from autoscale.product_service.main import create_app as create_product_app
from autoscale.stock_service.config import Settings as StockSettings
from autoscale.stock_service.main import create_app as create_stock_app


VALID_PRODUCT = {
    "name": "Awesome Gadget",
    "description": "The next big thing!",
    "price": 129.99,
    "stockQuantity": 50,
    "category": "Electronics",
    "imageUrl": "https://example.com/gadget.png",
}


@pytest.fixture
def valid_product():
    """A fresh copy of a complete product payload."""
    return dict(VALID_PRODUCT)


@pytest.fixture(scope="function")
def product_app():
    """Product service seeded with the five sample products."""
    return create_product_app(ProductSettings(seed_sample_data=True, otel_enabled=False))


@pytest.fixture(scope="function")
def client(product_app):
    """Create test client for a seeded product service."""
    with TestClient(product_app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def empty_client():
    """Create test client for a product service with an empty catalog."""
    app = create_product_app(ProductSettings(seed_sample_data=False, otel_enabled=False))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def stock_app():
    """Stock service seeded with the two sample stock levels."""
    return create_stock_app(StockSettings(seed_sample_data=True, otel_enabled=False))


@pytest.fixture(scope="function")
def stock_client(stock_app):
    with TestClient(stock_app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def empty_stock_client():
    """Create test client for a stock service with no stock levels."""
    app = create_stock_app(StockSettings(seed_sample_data=False, otel_enabled=False))
    with TestClient(app) as test_client:
        yield test_client
