"""
Lambda function protocols and type definitions.

This module defines the contracts that handlers and injected factories
implement.
"""

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class LambdaHandler(Protocol):
    """
    Protocol for the synchronous entrypoint the Lambda runtime invokes.
    """

    def __call__(self, event: dict[str, Any], context: Any) -> dict[str, Any]:
        """
        Execute the Lambda handler with the given event and context.

        Args:
            event: The Lambda event data
            context: The Lambda context object

        Returns:
            Response dictionary
        """
        ...


@runtime_checkable
class HttpClientFactory(Protocol):
    """
    Protocol for HTTP client factory functions.

    Used to swap the outbound transport, e.g. for an ``httpx.MockTransport``
    in tests.
    """

    async def __call__(self) -> httpx.AsyncClient:
        """
        Create and return an HTTP client.

        Returns:
            Client the handler uses for both outbound calls; it is closed
            when the invocation ends
        """
        ...
