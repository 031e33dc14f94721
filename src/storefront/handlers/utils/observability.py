"""
Logger, tracer and metrics shared by the storefront functions.

One instance of each lives per Lambda process, so the health, products and
orders functions and the services they call write to the same structured log
stream and metric namespace. Metrics emitted under ``Storefront``:

- ``HealthRequest``, ``ProductsRequest`` and ``OrderRequest``, one per invocation
- ``OrderCreated`` after an order row is written
- ``ValidationError`` and ``DependencyError`` from the error envelope
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'Storefront'

# POWERTOOLS_SERVICE_NAME names the function; LOG_LEVEL defaults to INFO
logger: Logger = Logger()

# X-Ray is switched off in tests with POWERTOOLS_TRACE_DISABLED
tracer: Tracer = Tracer()

# POWERTOOLS_SERVICE_NAME becomes the service dimension of every metric
metrics = Metrics(namespace=METRICS_NAMESPACE)
