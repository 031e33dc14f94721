"""
Health Handler - Lambda function for the liveness endpoint.

Answers without touching the database or the credentials secret, so it stays
up even when the store is unreachable.
"""

from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from storefront.handlers.utils.observability import logger, metrics, tracer
from storefront.handlers.utils.rest_api_resolver import HEALTH_PATH, create_api_response, create_resolver
from storefront.models.output import HealthCheckOutput

app = create_resolver()


@app.get(HEALTH_PATH)
@tracer.capture_method
def health_check() -> Response:
    """Report liveness."""
    logger.debug('Health check requested')
    return create_api_response(status_code=200, body=HealthCheckOutput().model_dump_json())


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    metrics.add_metric(name='HealthRequest', unit=MetricUnit.Count, value=1)
    return app.resolve(event, context)
