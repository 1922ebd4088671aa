"""
Error handling framework for the custom resource handler.

Errors fall into two classes: callback failures, which degrade into a warning
on an otherwise successful report, and everything else, which fails the
invocation.
"""

from .exceptions import (
    CallbackError,
    ConfigurationError,
    CustomResourceError,
    ImmutableIdentifierError,
    ResponseDeliveryError,
    UnsupportedRequestTypeError,
)
from .handlers import UNKNOWN_ERROR_MESSAGE, ErrorHandler
from .models import ErrorCategory, ErrorSeverity, ProcessingError

__all__ = [
    "CallbackError",
    "ConfigurationError",
    "CustomResourceError",
    "ErrorCategory",
    "ErrorHandler",
    "ErrorSeverity",
    "ImmutableIdentifierError",
    "ProcessingError",
    "ResponseDeliveryError",
    "UNKNOWN_ERROR_MESSAGE",
    "UnsupportedRequestTypeError",
]
