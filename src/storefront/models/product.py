"""
Product catalog model.

Products are owned by the catalog tables; the storefront only reads them, so the
model carries no mutation helpers.
"""

from decimal import Decimal
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalog entry as returned by the Catalog Lookup."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[Union[int, str], Field(
        description='Catalog identifier of the product',
        examples=[1, 42]
    )]

    price: Annotated[Decimal, Field(
        description='Current unit price of the product',
        examples=['12.50']
    )]

    name: Annotated[Optional[str], Field(
        description='Display name of the product',
        examples=['Espresso cup']
    )] = None

    image_url: Annotated[Optional[str], Field(
        description='Public URL of the product image'
    )] = None
