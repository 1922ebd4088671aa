"""
Pytest configuration and shared fixtures.
"""

import datetime
import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from github_oidc_resource.config.settings import get_settings

RESPONSE_URL = "https://cloudformation-custom-resource-response.example.com/presigned?sig=abc"
CALLBACK_URL = "https://api.example.com/github/oidc-callback"
FIXED_NOW = datetime.datetime(2024, 1, 1, 12, 0, 0, 123000, tzinfo=datetime.UTC)


@pytest.fixture
def mock_lambda_context() -> Any:
    """Create a mock Lambda context object."""
    context = MagicMock()
    context.function_name = "github-oidc-resource"
    context.aws_request_id = "test-request-id"
    context.log_group_name = "/aws/lambda/github-oidc-resource"
    context.log_stream_name = "2024/01/01/[$LATEST]test-stream"
    return context


def make_event(
    request_type: str = "Create",
    physical_resource_id: str | None = None,
    **properties: Any,
) -> dict[str, Any]:
    """Build a lifecycle event as the orchestrator sends it."""
    resource_properties = {
        "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:oidc",
        "GitHubOrg": "acme",
        "TrackedOrgId": "org-42",
        "RepositoryName": "infra",
        "OIDCProviderArn": "arn:aws:iam::123456789012:oidc-provider/token.actions.githubusercontent.com",
        "RoleArn": "arn:aws:iam::123456789012:role/github-actions",
    }
    resource_properties.update(properties)
    event = {
        "RequestType": request_type,
        "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:oidc",
        "ResponseURL": RESPONSE_URL,
        "StackId": "arn:aws:cloudformation:us-east-1:123456789012:stack/oidc/1",
        "RequestId": "req-1",
        "LogicalResourceId": "GitHubOidcSetup",
        "ResourceType": "Custom::GitHubOidc",
        "ResourceProperties": resource_properties,
    }
    if physical_resource_id is not None:
        event["PhysicalResourceId"] = physical_resource_id
    return event


@pytest.fixture
def create_event() -> dict[str, Any]:
    return make_event("Create")


class RecordingTransport:
    """
    Routes requests to per-method responders and records every request.

    Responders map a method (e.g. "PUT") to a status code or to a callable
    that receives the request and returns a response or raises.
    """

    def __init__(self, **responders: int | Callable[[httpx.Request], httpx.Response]):
        self.responders = {"PUT": 200, "POST": 200}
        self.responders.update(responders)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self.responders[request.method]
        if callable(responder):
            return responder(request)
        return httpx.Response(responder, text="ok")

    def by_method(self, method: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    def put_body(self) -> dict[str, Any]:
        (put,) = self.by_method("PUT")
        return json.loads(put.content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    async def factory(self) -> httpx.AsyncClient:
        return self.client()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def event_factory() -> Callable[..., dict[str, Any]]:
    """Factory for lifecycle events with overridable resource properties."""
    return make_event
