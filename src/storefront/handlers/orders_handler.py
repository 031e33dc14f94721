"""
Orders Handler - Lambda function for the order creation endpoint.

This module implements the handler layer for order intake: it hands the raw
request body to the Order Intake Processor and renders the outcome as an API
Gateway response. Dependencies are built once, at function initialization.
"""

import base64
import binascii
from typing import Any, Dict, Optional, Union

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from storefront.dal import get_dal_handler
from storefront.handlers.models.env_vars import get_handler_env_vars
from storefront.handlers.utils.db_configuration import load_db_configuration
from storefront.handlers.utils.error_handling import InvalidPayloadError, handle_service_errors
from storefront.handlers.utils.observability import logger, metrics, tracer
from storefront.handlers.utils.rest_api_resolver import ORDER_PATH, create_api_response, create_resolver
from storefront.logic.order_service import OrderIntakeProcessor
from storefront.models.output import CreateOrderOutput

app = create_resolver()

# Initialize service dependencies
env_vars = get_handler_env_vars()
db_config = load_db_configuration(env_vars.DB_SECRET_ARN)
store_dal = get_dal_handler(
    db_config,
    drivername=env_vars.DB_DRIVER,
    connection_limit=env_vars.DB_CONNECTION_LIMIT,
    pool_timeout_seconds=env_vars.DB_POOL_TIMEOUT_SECONDS,
)
order_service = OrderIntakeProcessor(catalog=store_dal, store=store_dal)


def _raw_body() -> Optional[Union[str, bytes]]:
    """Return the request body as received; base64 payloads are decoded to bytes, not text."""
    event = app.current_event
    if not event.is_base64_encoded or not event.body:
        return event.body
    try:
        return base64.b64decode(event.body, validate=True)
    except binascii.Error:
        raise InvalidPayloadError('Request body is not valid base64')


@app.post(ORDER_PATH)
@tracer.capture_method
@handle_service_errors
def create_order() -> Response:
    """
    Create a new order from the request body.

    Returns:
        201 with the order total, 400 for client input errors, 500 for database errors
    """
    logger.info('Create order request received')

    result = order_service.submit_order(_raw_body())

    return create_api_response(
        status_code=201,
        body=CreateOrderOutput(total=float(result.total)).model_dump_json(),
    )


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name='OrderRequest', unit=MetricUnit.Count, value=1)
    tracer.put_annotation('service', 'storefront-orders')
    return app.resolve(event, context)
