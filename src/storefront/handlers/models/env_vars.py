"""
Environment variable models for type-safe configuration.

This module defines Pydantic models for environment variables used by the
storefront handlers that need the catalog and the order store.
"""

from typing import Annotated

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field


class StoreHandlerEnvVars(BaseModel):
    """Environment variables for the products and orders handlers."""

    # Secrets Manager secret holding the database credentials
    DB_SECRET_ARN: Annotated[str, Field(
        description='ARN or name of the database credentials secret',
        min_length=1
    )]

    # SQLAlchemy driver used to reach the database
    DB_DRIVER: Annotated[str, Field(
        description='SQLAlchemy drivername for the store database'
    )] = 'mysql+pymysql'

    # Connection pool capacity, excess checkouts wait for a free connection
    DB_CONNECTION_LIMIT: Annotated[int, Field(
        description='Maximum concurrent database connections per process',
        ge=1,
        le=50
    )] = 5

    DB_POOL_TIMEOUT_SECONDS: Annotated[int, Field(
        description='Seconds a request waits for a pooled connection',
        ge=1,
        le=900
    )] = 900

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'storefront'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> StoreHandlerEnvVars:
    """
    Get typed environment variables for the store handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=StoreHandlerEnvVars)
