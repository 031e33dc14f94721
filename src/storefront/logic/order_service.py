"""
Business Logic Layer for order intake.

This module turns a raw cart payload into a persisted order: it validates the
payload, resolves prices through the Catalog Lookup, computes the total and
writes exactly one row to the Order Store.
"""

import json
from decimal import Decimal
from typing import Any, List, Optional, Union

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError

from storefront.dal import CatalogLookup, OrderStore
from storefront.handlers.utils.error_handling import (
    EmptyBodyError,
    EmptyCartError,
    InvalidPayloadError,
    ProductNotFoundError,
    dependency_guard,
)
from storefront.handlers.utils.observability import logger, metrics, tracer
from storefront.models.input import CartItem
from storefront.models.order import OrderResult


def _reject_constant(constant: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f'Invalid JSON constant: {constant}')


class OrderIntakeProcessor:
    """Validate-then-compute-then-persist pipeline for new orders."""

    def __init__(self, catalog: CatalogLookup, store: OrderStore):
        """
        Initialize the processor.

        Args:
            catalog: Collaborator resolving product ids to prices
            store: Collaborator persisting orders
        """
        self.catalog = catalog
        self.store = store

    @tracer.capture_method
    def submit_order(self, raw_payload: Optional[Union[str, bytes]]) -> OrderResult:
        """
        Create an order from a raw request body.

        Validation short-circuits on the first failure and no dependency is
        called before the cart has been read completely.

        Args:
            raw_payload: Request body as received

        Returns:
            Assigned order id and computed total

        Raises:
            EmptyBodyError: If the body is missing or empty
            InvalidPayloadError: If the body is not a JSON object or a cart line is unreadable
            EmptyCartError: If ``items`` is not a non-empty list
            ProductNotFoundError: For the first line whose product is unknown
            DependencyError: If the catalog or the store fails
        """
        items = self._parse_cart(raw_payload)

        product_ids = {item.product_id for item in items if item.product_id is not None}
        with dependency_guard('get_prices'):
            known_products = self.catalog.get_prices(product_ids)
        price_map = {product.id: product.price for product in known_products}

        total = self._compute_total(items, price_map)

        with dependency_guard('create_order_in_db'):
            order_id = self.store.create_order_in_db(total)

        logger.info('ORDER_CREATED_OK', extra={
            'order_id': order_id,
            'items_count': len(items),
            'total': str(total),
        })
        tracer.put_annotation('order_id', str(order_id))
        metrics.add_metric(name='OrderCreated', unit=MetricUnit.Count, value=1)

        return OrderResult(order_id=order_id, total=total, item_count=len(items))

    def _parse_cart(self, raw_payload: Optional[Union[str, bytes]]) -> List[CartItem]:
        if not raw_payload:
            raise EmptyBodyError()

        try:
            payload = json.loads(raw_payload, parse_constant=_reject_constant)
        except ValueError:
            logger.debug('Request body is not JSON', extra={'body_length': len(raw_payload)})
            raise InvalidPayloadError()

        if not isinstance(payload, dict):
            raise InvalidPayloadError()

        raw_items = payload.get('items')
        if not isinstance(raw_items, list) or not raw_items:
            raise EmptyCartError()

        try:
            return [CartItem.from_payload(raw_item) for raw_item in raw_items]
        except ValidationError as e:
            logger.debug('Cart line rejected', extra={'error_count': e.error_count()})
            raise InvalidPayloadError('Cart contains an unreadable line')

    @staticmethod
    def _compute_total(items: List[CartItem], price_map: dict) -> Decimal:
        # duplicated product ids are priced once per line
        total = Decimal(0)
        for item in items:
            price = price_map.get(item.product_id)
            if price is None:
                raise ProductNotFoundError(
                    item.product_id,
                    echo_product_id='product_id' in item.model_fields_set,
                )
            total += price * item.quantity
        return total
