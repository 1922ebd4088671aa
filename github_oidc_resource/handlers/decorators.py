"""
Lambda handler decorators for dependency injection and composition.

This module provides decorators for:
- @lambda_handler - Main decorator for async Lambda handlers
- @with_config - Configuration injection
- @with_http_client - HTTP client injection
"""

import asyncio
import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from ..config.settings import Settings, get_settings
from .lifecycle import lambda_lifecycle
from .protocols import HttpClientFactory

T = TypeVar("T", bound=Callable[..., Any])


def lambda_handler(func: T) -> Callable[[dict[str, Any], Any], dict[str, Any]]:
    """
    Main decorator for async Lambda handlers.

    This decorator:
    - Wraps async handlers to work with synchronous Lambda runtime
    - Runs each invocation inside lambda_lifecycle()

    Args:
        func: Async handler function

    Returns:
        Synchronous Lambda handler compatible with AWS Lambda runtime

    Example:
        @lambda_handler
        async def handler(event, context):
            return {"Status": "SUCCESS"}
    """
    if not inspect.iscoroutinefunction(func):
        raise TypeError(
            f"@lambda_handler can only be applied to async functions. "
            f"{func.__name__} is not async."
        )

    @functools.wraps(func)
    def wrapper(
        event: dict[str, Any],
        context: Any,  # AWS Lambda context object
    ) -> dict[str, Any]:
        """Synchronous wrapper for async handler."""

        async def async_wrapper() -> dict[str, Any]:
            async with lambda_lifecycle(context):
                # Inner decorators add their dependencies to kwargs
                return await func(event, context)

        return asyncio.run(async_wrapper())

    return wrapper


def with_config(
    func: T | None = None,
    *,
    settings_class: type[Settings] | None = None,
) -> (
    Callable[[T], Callable[..., Any]]
    | Callable[..., Any]
):
    """
    Decorator for injecting configuration settings into handler.

    Injects the cached settings object as the ``settings`` keyword when the
    handler declares that parameter.

    Args:
        func: Handler function (if used as @with_config)
        settings_class: Optional custom settings class

    Returns:
        Decorated handler function

    Example:
        @lambda_handler
        @with_config(settings_class=ResourceSettings)
        async def handler(event, context, settings: ResourceSettings):
            ...
    """

    def decorator(handler_func: T) -> Callable[..., Any]:
        if not inspect.iscoroutinefunction(handler_func):
            raise TypeError(
                f"@with_config can only be applied to async functions. "
                f"{handler_func.__name__} is not async."
            )

        @functools.wraps(handler_func)
        async def wrapper(
            event: dict[str, Any],
            context: Any,
            *args: Any,
            **kwargs: Any,
        ) -> dict[str, Any]:
            """Wrapper that injects settings."""
            settings = get_settings(settings_class or Settings)

            sig = inspect.signature(handler_func)
            if "settings" in sig.parameters:
                return await handler_func(
                    event, context, *args, settings=settings, **kwargs
                )
            # Handler doesn't expect settings, call without it
            return await handler_func(event, context, *args, **kwargs)

        return wrapper

    # Support both @with_config and @with_config(...) syntax
    if func is None:
        return decorator
    else:
        return decorator(func)


def with_http_client(
    func: T | None = None,
    *,
    factory: HttpClientFactory | None = None,
) -> (
    Callable[[T], Callable[..., Any]]
    | Callable[..., Any]
):
    """
    Decorator for injecting an ``httpx.AsyncClient`` into handler.

    This decorator:
    - Injects the client as the ``http_client`` keyword
    - Uses ``settings.HTTP_TIMEOUT`` when an outer @with_config supplied settings
    - Always closes the client when the handler returns or raises

    Args:
        func: Handler function (if used as @with_http_client)
        factory: Optional custom client factory

    Returns:
        Decorated handler function

    Example:
        @lambda_handler
        @with_config(settings_class=ResourceSettings)
        @with_http_client
        async def handler(event, context, settings, http_client):
            ...
    """

    def decorator(handler_func: T) -> Callable[..., Any]:
        if not inspect.iscoroutinefunction(handler_func):
            raise TypeError(
                f"@with_http_client can only be applied to async functions. "
                f"{handler_func.__name__} is not async."
            )

        @functools.wraps(handler_func)
        async def wrapper(
            event: dict[str, Any],
            context: Any,
            *args: Any,
            **kwargs: Any,
        ) -> dict[str, Any]:
            """Wrapper that injects an HTTP client."""
            sig = inspect.signature(handler_func)
            if "http_client" not in sig.parameters:
                return await handler_func(event, context, *args, **kwargs)

            if factory:
                client = await factory()
                try:
                    return await handler_func(
                        event, context, *args, http_client=client, **kwargs
                    )
                finally:
                    await client.aclose()

            settings = kwargs.get("settings")
            timeout = getattr(settings, "HTTP_TIMEOUT", None)
            async with httpx.AsyncClient(timeout=timeout) as client:
                return await handler_func(
                    event, context, *args, http_client=client, **kwargs
                )

        return wrapper

    if func is None:
        return decorator
    else:
        return decorator(func)
