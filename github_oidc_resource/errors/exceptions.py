"""
Exception hierarchy for the custom resource handler.
"""


class CustomResourceError(Exception):
    """Base class for all custom resource errors."""


class ConfigurationError(CustomResourceError):
    """Raised when the event or its resource properties are malformed."""


class UnsupportedRequestTypeError(CustomResourceError):
    """Raised for a RequestType other than Create, Update or Delete."""

    def __init__(self, request_type: str) -> None:
        self.request_type = request_type
        super().__init__(f"Unsupported request type: {request_type!r}")


class ImmutableIdentifierError(CustomResourceError):
    """Raised when an update tries to rebind the resource to another org."""

    def __init__(self, original: str, attempted: str) -> None:
        self.original = original
        self.attempted = attempted
        super().__init__(
            f"TrackedOrgId cannot be changed after creation "
            f"(original: {original}, attempted: {attempted}). "
            f"Create a new resource instead of updating this one."
        )


class CallbackError(CustomResourceError):
    """
    Raised when the external notification callback fails.

    Attributes:
        status_code: HTTP status returned by the callback, or None when the
            request never completed (transport failure)
        body: Response body, or the transport error text
    """

    def __init__(self, status_code: int | None, body: str) -> None:
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"Callback request failed: {body}"
        else:
            message = f"Callback failed with status {status_code}: {body}"
        super().__init__(message)


class ResponseDeliveryError(CustomResourceError):
    """Raised when the status report cannot be delivered to the orchestrator."""
