"""
AWS Lambda Handlers Module.

This module contains the Lambda function handlers that serve as entry points
for the storefront. Each handler is deployed as its own function:

- health_handler: liveness check, no dependencies
- products_handler: product listing
- orders_handler: order creation

The handler modules are imported by the Lambda runtime directly; importing
products_handler or orders_handler reads the database secret and builds the
connection pool.
"""

from storefront.handlers.utils.observability import logger, metrics, tracer
from storefront.handlers.utils.rest_api_resolver import HEALTH_PATH, ORDER_PATH, PRODUCTS_PATH

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "HEALTH_PATH",
    "PRODUCTS_PATH",
    "ORDER_PATH",
]
