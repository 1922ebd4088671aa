"""
Lambda entrypoint for the GitHub OIDC custom resource.

Configure the function's handler as ``github_oidc_resource.handler.handler``.
"""

import json
import logging
from typing import Any

import httpx

from .config.settings import ResourceSettings
from .handlers.decorators import lambda_handler, with_config, with_http_client
from .handlers.protocols import HttpClientFactory, LambdaHandler
from .models import ExecutionContext, LifecycleEvent
from .resource.dispatch import LifecycleDispatcher
from .resource.notifier import ExternalNotifier
from .resource.reporter import ResponseReporter

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "github_oidc_resource"


async def handle_event(
    event: dict[str, Any],
    context: Any,
    *,
    settings: ResourceSettings,
    http_client: httpx.AsyncClient,
) -> dict[str, Any]:
    """
    Handle one Create, Update or Delete invocation.

    Exactly one status report is sent. Only a failure to deliver that report,
    or an envelope without a response URL, escapes as an exception.

    Returns:
        The delivered status report body
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.LOG_LEVEL.upper())
    logger.info(f"Request received: {json.dumps(event, indent=2, default=str)}")

    lifecycle_event = LifecycleEvent.from_event(event)
    execution_context = ExecutionContext.from_lambda_context(context)

    dispatcher = LifecycleDispatcher(
        ExternalNotifier(http_client), callback_warning=settings.CALLBACK_WARNING
    )
    outcome = await dispatcher.dispatch(lifecycle_event)

    report = await ResponseReporter(http_client).send(
        lifecycle_event, execution_context, outcome
    )
    return report.to_body()


def build_handler(factory: HttpClientFactory | None = None) -> LambdaHandler:
    """
    Compose the synchronous Lambda handler.

    Args:
        factory: Optional HTTP client factory, e.g. one with a mock transport

    Returns:
        Handler with settings and an HTTP client injected per invocation
    """
    return lambda_handler(
        with_config(settings_class=ResourceSettings)(
            with_http_client(factory=factory)(handle_event)
        )
    )


handler = build_handler()
