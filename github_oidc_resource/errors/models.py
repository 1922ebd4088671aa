"""
Error models and data classes for error handling.
"""

from dataclasses import dataclass
import datetime
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    IDENTITY = "identity"
    NETWORK = "network"
    SYSTEM = "system"


@dataclass
class ProcessingError:
    """Structured error information."""

    error_id: str
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: dict[str, Any] | None = None
    timestamp: datetime.datetime | None = None
    is_recoverable: bool = False

    def __post_init__(self) -> None:
        """Set default timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = datetime.datetime.now(datetime.UTC)
