"""
Lambda handler utilities and decorators.
"""

from .decorators import lambda_handler, with_config, with_http_client
from .lifecycle import lambda_lifecycle
from .protocols import HttpClientFactory, LambdaHandler

__all__ = [
    "lambda_handler",
    "with_config",
    "with_http_client",
    "lambda_lifecycle",
    "LambdaHandler",
    "HttpClientFactory",
]
