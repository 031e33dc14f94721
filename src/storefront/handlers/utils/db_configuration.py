"""
Database configuration loader backed by AWS Secrets Manager.

The credentials secret is read through the Powertools parameters utility and
validated into a DatabaseConfig. A missing or malformed secret is fatal: the
handlers that need the database build their configuration at import time.
"""

from typing import Optional

from aws_lambda_powertools.utilities.parameters import SecretsProvider
from aws_lambda_powertools.utilities.parameters.exceptions import GetParameterError, TransformParameterError
from pydantic import ValidationError

from storefront.handlers.models.db_configuration import DatabaseConfig
from storefront.handlers.utils.observability import logger, tracer


class DatabaseConfigError(Exception):
    """Raised when the database credentials secret cannot be turned into a configuration."""
    pass


@tracer.capture_method
def load_db_configuration(secret_id: str, provider: Optional[SecretsProvider] = None) -> DatabaseConfig:
    """
    Fetch the credentials secret and validate it into a DatabaseConfig.

    Args:
        secret_id: Name or ARN of the secret
        provider: Secrets provider to read from, a default one is created when omitted

    Returns:
        Read-only database configuration

    Raises:
        DatabaseConfigError: If the secret is unreadable, not JSON or misses required fields
    """
    provider = provider or SecretsProvider()

    try:
        secret = provider.get(secret_id, transform='json')
    except (GetParameterError, TransformParameterError) as e:
        logger.error('Failed to read database secret', extra={'secret_id': secret_id, 'error': str(e)})
        raise DatabaseConfigError(f"Cannot read database secret '{secret_id}'") from e

    if not isinstance(secret, dict):
        logger.error('Database secret is not a JSON object', extra={'secret_id': secret_id})
        raise DatabaseConfigError(f"Database secret '{secret_id}' is not a JSON object")

    try:
        config = DatabaseConfig.from_secret(secret)
    except ValidationError as e:
        invalid_fields = sorted({str(error['loc'][0]) for error in e.errors()})
        logger.error('Invalid DB secret payload', extra={
            'secret_id': secret_id,
            'invalid_fields': invalid_fields,
            'present_keys': sorted(secret.keys()),
        })
        raise DatabaseConfigError(f"Database secret missing required fields: {', '.join(invalid_fields)}") from e

    logger.info('Database configuration loaded', extra={
        'host': config.host,
        'database': config.database,
        'port': config.port,
    })
    return config
