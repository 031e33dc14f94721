"""
Business Logic Layer for the product catalog.
"""

from typing import List

from storefront.dal import CatalogLookup
from storefront.handlers.utils.error_handling import dependency_guard
from storefront.handlers.utils.observability import logger, tracer
from storefront.models.product import Product


class CatalogService:
    """Read-only passthrough over the Catalog Lookup."""

    def __init__(self, catalog: CatalogLookup):
        self.catalog = catalog

    @tracer.capture_method
    def list_products(self) -> List[Product]:
        """
        Return the catalog snapshot, in whatever order the catalog yields it.

        Raises:
            DependencyError: If the catalog cannot be read
        """
        with dependency_guard('list_products'):
            catalog_products = self.catalog.list_products()

        logger.info('Products listed', extra={'product_count': len(catalog_products)})
        return catalog_products
