"""
Error handler with classification and severity-based logging.
"""

import logging
import time
from typing import Any

from .exceptions import (
    CallbackError,
    ConfigurationError,
    ImmutableIdentifierError,
    UnsupportedRequestTypeError,
)
from .models import ErrorCategory, ErrorSeverity, ProcessingError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class ErrorHandler:
    """Centralized error handling for lifecycle invocations."""

    def __init__(self) -> None:
        self.error_counts: dict[ErrorCategory, int] = {}

    def classify_error(
        self, error: Exception, context: dict[str, Any] | None = None
    ) -> ProcessingError:
        """
        Classify and categorize an error.

        Args:
            error: The exception that occurred
            context: Additional context information

        Returns:
            ProcessingError with classification
        """
        error_id = f"ERR_{int(time.time())}_{id(error)}"

        if isinstance(error, CallbackError):
            # The only class the invocation survives
            category = ErrorCategory.NETWORK
            severity = ErrorSeverity.MEDIUM
            is_recoverable = True
        elif isinstance(error, ImmutableIdentifierError):
            category = ErrorCategory.IDENTITY
            severity = ErrorSeverity.CRITICAL
            is_recoverable = False
        elif isinstance(error, ConfigurationError):
            category = ErrorCategory.CONFIGURATION
            severity = ErrorSeverity.HIGH
            is_recoverable = False
        elif isinstance(error, (UnsupportedRequestTypeError, ValueError)):
            category = ErrorCategory.VALIDATION
            severity = ErrorSeverity.HIGH
            is_recoverable = False
        else:
            category = ErrorCategory.SYSTEM
            severity = ErrorSeverity.HIGH
            is_recoverable = False

        return ProcessingError(
            error_id=error_id,
            category=category,
            severity=severity,
            message=str(error) or UNKNOWN_ERROR_MESSAGE,
            details=context or {},
            is_recoverable=is_recoverable,
        )

    def handle_error(
        self, error: Exception, context: dict[str, Any] | None = None
    ) -> ProcessingError:
        """
        Classify, count and log an error.

        Args:
            error: The exception that occurred
            context: Additional context information

        Returns:
            ProcessingError after handling
        """
        processing_error = self.classify_error(error, context)

        self.error_counts[processing_error.category] = (
            self.error_counts.get(processing_error.category, 0) + 1
        )

        # Tracebacks only for errors that fail the invocation
        exc_info = None if processing_error.is_recoverable else error

        if processing_error.severity == ErrorSeverity.CRITICAL:
            logger.critical(
                f"Critical error: {processing_error.message}", exc_info=exc_info
            )
        elif processing_error.severity == ErrorSeverity.HIGH:
            logger.error(
                f"High severity error: {processing_error.message}", exc_info=exc_info
            )
        elif processing_error.severity == ErrorSeverity.MEDIUM:
            logger.warning(f"Medium severity error: {processing_error.message}")
        else:
            logger.info(f"Low severity error: {processing_error.message}")

        return processing_error
