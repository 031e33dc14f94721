"""
Pytest configuration and shared fixtures for the storefront Lambda handlers.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import base64
import importlib
import json
import os
from decimal import Decimal
from types import SimpleNamespace
from typing import Any, Dict, Iterable, List, Optional, Union
from unittest.mock import Mock, patch

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.pool import StaticPool

from storefront.models.product import Product

# Applied at import so module-level Powertools utilities see it during collection
TEST_ENVIRONMENT = {
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "DB_SECRET_ARN": "arn:aws:secretsmanager:us-east-1:123456789012:secret:test-storedb",
    "POWERTOOLS_SERVICE_NAME": "test-storefront",
    "POWERTOOLS_METRICS_NAMESPACE": "TestStorefront",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
}
os.environ.update(TEST_ENVIRONMENT)


class InMemoryStoreDal:
    """In-memory Catalog Lookup and Order Store recording every call."""

    def __init__(self, prices: Optional[Dict[Union[int, str], Any]] = None, fail_on: Optional[str] = None):
        self.prices = {product_id: Decimal(str(price)) for product_id, price in (prices or {}).items()}
        self.fail_on = fail_on
        self.price_lookups: List[set] = []
        self.inserted_totals: List[Decimal] = []

    def _maybe_fail(self, operation: str) -> None:
        if self.fail_on == operation:
            raise ConnectionError(f"connection refused by db-host-1 during {operation}")

    def get_prices(self, product_ids: Iterable[Union[int, str]]) -> List[Product]:
        ids = set(product_ids)
        self.price_lookups.append(ids)
        self._maybe_fail("get_prices")
        return [Product(id=product_id, price=price) for product_id, price in self.prices.items() if product_id in ids]

    def list_products(self) -> List[Product]:
        self._maybe_fail("list_products")
        return [
            Product(id=product_id, name=f"Product {product_id}", price=price)
            for product_id, price in self.prices.items()
        ]

    def create_order_in_db(self, total_amount: Decimal) -> int:
        self._maybe_fail("create_order_in_db")
        self.inserted_totals.append(total_amount)
        return len(self.inserted_totals)


@pytest.fixture
def make_store_dal():
    """Factory for in-memory store backends with custom prices or failures."""
    return InMemoryStoreDal


@pytest.fixture
def store_dal() -> InMemoryStoreDal:
    """Catalog with two products, A at 5 and B at 3."""
    return InMemoryStoreDal(prices={"A": 5, "B": 3})


# Database fixtures
@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine with the storefront schema."""
    from storefront.dal.schema import metadata

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def populated_engine(sqlite_engine):
    """SQLite engine holding a small catalog."""
    from storefront.dal.schema import products

    with sqlite_engine.begin() as connection:
        connection.execute(insert(products), [
            {"id": 1, "name": "Espresso cup", "price": Decimal("5.00"), "image_url": "https://cdn.example.com/1.png"},
            {"id": 2, "name": "Saucer", "price": Decimal("3.00"), "image_url": None},
            {"id": 3, "name": "Gift card", "price": Decimal("0.00"), "image_url": None},
        ])
    return sqlite_engine


# Secrets fixtures
@pytest.fixture(scope="session")
def db_secret() -> Dict[str, Any]:
    """RDS-style credentials secret payload."""
    return {
        "host": "storedb.cluster-abc.us-east-1.rds.amazonaws.com",
        "username": "store_app",
        "password": "s3cr3t-value",
        "dbname": "storedb",
        "port": 3306,
    }


@pytest.fixture(scope="session")
def handler_modules(db_secret):
    """Import the database-backed handlers with the credentials secret patched in."""
    with patch("storefront.handlers.utils.db_configuration.SecretsProvider") as provider_cls:
        provider_cls.return_value.get.return_value = db_secret
        orders_handler = importlib.import_module("storefront.handlers.orders_handler")
        products_handler = importlib.import_module("storefront.handlers.products_handler")

    return SimpleNamespace(orders=orders_handler, products=products_handler)


# API Gateway fixtures
@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway REST proxy events."""

    def make_event(
        method: str,
        path: str,
        body: Optional[Union[str, Dict[str, Any]]] = None,
        base64_encoded: bool = False,
    ) -> Dict[str, Any]:
        if isinstance(body, dict):
            body = json.dumps(body)
        if body is not None and base64_encoded:
            body = base64.b64encode(body.encode("utf-8")).decode("ascii")

        return {
            "resource": path,
            "httpMethod": method,
            "path": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "multiValueHeaders": {},
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "resourcePath": path,
                "httpMethod": method,
                "path": f"/test{path}",
                "protocol": "HTTP/1.1",
                "requestTime": "2024-01-01T12:00:00.000Z",
                "requestTimeEpoch": 1704110400000,
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": base64_encoded,
        }

    return make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-storefront-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-storefront-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis = lambda: 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-storefront-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Integration test fixtures
@pytest.fixture
def integration_client():
    """HTTP client for end-to-end testing against a deployed stage."""
    import httpx

    base_url = os.environ.get("API_BASE_URL")
    if not base_url:
        pytest.skip("API_BASE_URL is not set")

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        yield client


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.path):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.path):
            item.add_marker(pytest.mark.e2e)
