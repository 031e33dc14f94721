"""
REST API resolver utility for the storefront Lambda handlers.

Each Lambda function owns its own API Gateway REST resolver; this module holds the
route constants, the permissive CORS headers and the response envelope they share.
"""

from typing import Dict

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response, content_types

# API path constants
HEALTH_PATH = '/health'
PRODUCTS_PATH = '/products'
ORDER_PATH = '/order'

# Sent on every response, errors included
CORS_HEADERS: Dict[str, str] = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'GET,POST,OPTIONS',
}


def create_resolver() -> APIGatewayRestResolver:
    """Create an API Gateway REST resolver for a single storefront function."""
    return APIGatewayRestResolver(debug=False)


def create_api_response(status_code: int, body: str) -> Response:
    """
    Build a JSON response carrying the storefront CORS headers.

    Args:
        status_code: HTTP status code
        body: Serialized JSON body

    Returns:
        Powertools response ready to be returned from a route
    """
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=body,
        headers={'Content-Type': content_types.APPLICATION_JSON, **CORS_HEADERS},
    )
