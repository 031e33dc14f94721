"""
Storefront Models Package

This package contains the Pydantic models used throughout the service,
including the cart input model, catalog and order domain models, and
response output models.
"""

from .input import CartItem
from .order import OrderResult
from .output import CreateOrderOutput, ErrorOutput, HealthCheckOutput, ProductOutput
from .product import Product

__all__ = [
    # Input models
    "CartItem",

    # Output models
    "CreateOrderOutput",
    "ErrorOutput",
    "HealthCheckOutput",
    "ProductOutput",

    # Domain models
    "OrderResult",
    "Product",
]
