"""
Input models for order intake.

The inbound cart payload is deliberately loose: quantities are coerced rather
than checked, so a negative or fractional quantity flows straight into the total.
"""

from decimal import Decimal
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

DEFAULT_QUANTITY = 1


class CartItem(BaseModel):
    """A single requested line of the cart."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_id: Annotated[Optional[Union[StrictInt, StrictStr]], Field(
        alias='productId',
        description='Identifier of the requested product',
        examples=[1, 'sku-42']
    )] = None

    quantity: Annotated[Decimal, Field(
        description='Requested quantity, defaults to 1 when absent or falsy',
        examples=[1, 3]
    )] = Decimal(DEFAULT_QUANTITY)

    @field_validator('product_id', mode='before')
    @classmethod
    def integral_float_id(cls, v: Any) -> Any:
        """Read ``1.0`` as product ``1``; other floats stay invalid."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @field_validator('quantity', mode='before')
    @classmethod
    def resolve_quantity(cls, v: Any) -> Any:
        """Default falsy quantities to 1 and read booleans as integers."""
        if not v:
            return DEFAULT_QUANTITY
        if isinstance(v, bool):
            return int(v)
        return v

    @classmethod
    def from_payload(cls, item: Any) -> 'CartItem':
        """Build a cart item from one raw ``items`` entry; non-objects carry no product id."""
        if not isinstance(item, dict):
            return cls()
        return cls.model_validate(item)
