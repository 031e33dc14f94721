"""
Error handling utilities for the storefront Lambda handlers.

This module defines the service error taxonomy raised by the logic layer and
the helpers that turn those errors into API Gateway responses, logs and metrics.
"""

from contextlib import contextmanager
from enum import Enum
from functools import wraps
from typing import Iterator, Optional, Union

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from storefront.handlers.utils.observability import logger, metrics
from storefront.handlers.utils.rest_api_resolver import create_api_response
from storefront.models.output import ErrorOutput


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    DEPENDENCY = "DEPENDENCY"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int,
        category: ErrorCategory,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.category = category

    def to_output(self) -> ErrorOutput:
        """Build the public error body; never carries diagnostic detail."""
        return ErrorOutput(error=self.error_code)


class ClientInputError(BaseServiceError):
    """Raised when the request itself is unusable. Never retried."""

    def __init__(self, message: str, error_code: str):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=400,
            category=ErrorCategory.VALIDATION,
        )


class EmptyBodyError(ClientInputError):
    """Raised when the request carries no body."""

    def __init__(self):
        super().__init__(message="Request body is empty", error_code="EMPTY_BODY")


class InvalidPayloadError(ClientInputError):
    """Raised when the body is not a JSON object or a cart line cannot be read."""

    def __init__(self, message: str = "Request body is not a valid JSON object"):
        super().__init__(message=message, error_code="INVALID_JSON")


class EmptyCartError(ClientInputError):
    """Raised when ``items`` is missing, not a list, or empty."""

    def __init__(self):
        super().__init__(message="Cart has no items", error_code="EMPTY_CART")


class ProductNotFoundError(ClientInputError):
    """Raised for the first cart line whose product is unknown to the catalog."""

    def __init__(self, product_id: Optional[Union[int, str]], echo_product_id: bool = True):
        super().__init__(
            message=f"Product '{product_id}' not found",
            error_code="PRODUCT_NOT_FOUND",
        )
        self.product_id = product_id
        # false when the cart line never carried a productId key
        self.echo_product_id = echo_product_id

    def to_output(self) -> ErrorOutput:
        if not self.echo_product_id:
            return ErrorOutput(error=self.error_code)
        return ErrorOutput(error=self.error_code, productId=self.product_id)


class DependencyError(BaseServiceError):
    """Raised when the catalog or the order store cannot be reached."""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Dependency call '{operation}' failed",
            error_code="DB_ERROR",
            status_code=500,
            category=ErrorCategory.DEPENDENCY,
        )
        self.operation = operation


@contextmanager
def dependency_guard(operation: str) -> Iterator[None]:
    """Translate any collaborator failure inside the block into a DependencyError."""
    try:
        yield
    except BaseServiceError:
        raise
    except Exception as e:
        logger.exception("Dependency call failed", extra={
            "operation": operation,
            "error_type": type(e).__name__,
        })
        raise DependencyError(operation=operation) from e


def log_error_metrics(error: BaseServiceError) -> None:
    """Log a service error and count it by error code."""
    log_extra = {
        "error_code": error.error_code,
        "category": error.category.value,
        "status_code": error.status_code,
    }
    if error.category == ErrorCategory.VALIDATION:
        logger.warning(error.message, extra=log_extra)
    else:
        logger.error(error.message, extra=log_extra)

    metrics.add_metric(name=f"{error.category.value.title()}Error", unit=MetricUnit.Count, value=1)


def error_response(error: BaseServiceError) -> Response:
    """Convert a service error into the API response envelope."""
    log_error_metrics(error)
    return create_api_response(
        status_code=error.status_code,
        body=error.to_output().model_dump_json(exclude_unset=True),
    )


def handle_service_errors(func):
    """Decorator to handle service errors and convert to HTTP responses."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BaseServiceError as e:
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in handler", extra={
                "error_type": type(e).__name__,
                "function_name": func.__name__,
            })
            return error_response(DependencyError(operation=func.__name__))

    return wrapper
