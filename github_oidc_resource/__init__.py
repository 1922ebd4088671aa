"""
GitHub OIDC custom resource - lifecycle callback handler for CloudFormation.

On Create the handler optionally notifies an external service of the
provisioned role and identity provider, on Update it refuses to rebind the
resource to a different tracked organization, and on every invocation it
reports SUCCESS or FAILED back to the orchestrator's response URL.

Example:
    # Lambda handler setting: github_oidc_resource.handler.handler
    from github_oidc_resource.handler import handler

    handler(event, context)
"""

__version__ = "0.1.0"

from .config import ResourceSettings, Settings, get_settings
from .errors import (
    CallbackError,
    ConfigurationError,
    CustomResourceError,
    ErrorHandler,
    ImmutableIdentifierError,
    ResponseDeliveryError,
    UnsupportedRequestTypeError,
)
from .handler import build_handler, handle_event
from .handlers import (
    LambdaHandler,
    lambda_handler,
    with_config,
    with_http_client,
)
from .identifiers import PHYSICAL_ID_PREFIX, decode_physical_id, encode_physical_id
from .models import (
    ExecutionContext,
    LifecycleEvent,
    Outcome,
    RequestType,
    ResourceProperties,
    Status,
    StatusReport,
)

__all__ = [
    "CallbackError",
    "ConfigurationError",
    "CustomResourceError",
    "ErrorHandler",
    "ExecutionContext",
    "ImmutableIdentifierError",
    "LambdaHandler",
    "LifecycleEvent",
    "Outcome",
    "PHYSICAL_ID_PREFIX",
    "RequestType",
    "ResourceProperties",
    "ResourceSettings",
    "ResponseDeliveryError",
    "Settings",
    "Status",
    "StatusReport",
    "UnsupportedRequestTypeError",
    "build_handler",
    "decode_physical_id",
    "encode_physical_id",
    "get_settings",
    "handle_event",
    "lambda_handler",
    "with_config",
    "with_http_client",
]
