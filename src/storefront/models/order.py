"""
Order intake result model.
"""

from decimal import Decimal
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field


class OrderResult(BaseModel):
    """Outcome of a successful order intake."""

    model_config = ConfigDict(frozen=True)

    order_id: Annotated[Union[int, str], Field(
        description='Identifier assigned by the Order Store'
    )]

    total: Annotated[Decimal, Field(
        description='Sum of price times quantity over the cart, in input order'
    )]

    item_count: Annotated[int, Field(
        ge=1,
        description='Number of cart lines priced into the total'
    )]
