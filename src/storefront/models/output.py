"""
Output models for API responses using Pydantic.

This module defines the bodies returned by the storefront Lambda handlers.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from storefront.models.product import Product


class HealthCheckOutput(BaseModel):
    """Response model for the health endpoint."""

    status: Annotated[Literal['ok'], Field(
        description='Liveness status'
    )] = 'ok'


class CreateOrderOutput(BaseModel):
    """Response model for successful order creation."""

    status: Annotated[Literal['ok'], Field(
        description='Outcome of the order intake'
    )] = 'ok'

    total: Annotated[float, Field(
        description='Total order amount',
        examples=[13.0]
    )]


class ProductOutput(BaseModel):
    """Response model for a single catalog entry."""

    id: Annotated[Union[int, str], Field(
        description='Catalog identifier of the product'
    )]

    name: Annotated[Optional[str], Field(
        description='Display name of the product'
    )] = None

    price: Annotated[float, Field(
        description='Current unit price',
        examples=[12.5]
    )]

    image_url: Annotated[Optional[str], Field(
        description='Public URL of the product image'
    )] = None

    @classmethod
    def from_product(cls, product: Product) -> 'ProductOutput':
        return cls(
            id=product.id,
            name=product.name,
            price=float(product.price),
            image_url=product.image_url,
        )


class ErrorOutput(BaseModel):
    """Response model for every error envelope."""

    error: Annotated[str, Field(
        description='Machine readable error code',
        examples=['EMPTY_CART', 'DB_ERROR']
    )]

    productId: Annotated[Optional[Union[int, str]], Field(
        description='Offending product identifier for PRODUCT_NOT_FOUND'
    )] = None
