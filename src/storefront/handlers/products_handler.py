"""
Products Handler - Lambda function for the product listing endpoint.

The database configuration and connection pool are built once, when the
function is initialized; a missing or invalid credentials secret fails the
initialization instead of individual requests.
"""

from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import TypeAdapter

from storefront.dal import get_dal_handler
from storefront.handlers.models.env_vars import get_handler_env_vars
from storefront.handlers.utils.db_configuration import load_db_configuration
from storefront.handlers.utils.error_handling import handle_service_errors
from storefront.handlers.utils.observability import logger, metrics, tracer
from storefront.handlers.utils.rest_api_resolver import PRODUCTS_PATH, create_api_response, create_resolver
from storefront.logic.catalog_service import CatalogService
from storefront.models.output import ProductOutput

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
catalog_service = CatalogService(catalog=store_dal)

_products_adapter = TypeAdapter(list[ProductOutput])


@app.get(PRODUCTS_PATH)
@tracer.capture_method
@handle_service_errors
def get_products() -> Response:
    """
    List the catalog.

    Returns:
        200 with the product list
    """
    catalog_products = catalog_service.list_products()
    body = _products_adapter.dump_json([ProductOutput.from_product(product) for product in catalog_products])
    return create_api_response(status_code=200, body=body.decode('utf-8'))


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
    metrics.add_metric(name='ProductsRequest', unit=MetricUnit.Count, value=1)
    return app.resolve(event, context)
