"""
Business Logic Layer Module.

This module contains the storefront domain operations, sitting between the
Lambda handlers and the data access layer:

- order_service: order intake (cart validation, pricing, persistence)
- catalog_service: product listing
"""

from storefront.logic.catalog_service import CatalogService
from storefront.logic.order_service import OrderIntakeProcessor

__all__ = [
    "CatalogService",
    "OrderIntakeProcessor",
]
