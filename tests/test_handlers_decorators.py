"""
Tests for handler decorators.
"""

import os
from unittest.mock import patch

import httpx
import pytest

from conftest import RecordingTransport
from github_oidc_resource.config.settings import ResourceSettings, Settings
from github_oidc_resource.handlers.decorators import (
    lambda_handler,
    with_config,
    with_http_client,
)


class TestLambdaHandler:
    """Tests for @lambda_handler decorator."""

    @pytest.mark.unit
    def test_lambda_handler_decorates_async_function(
        self, create_event, mock_lambda_context
    ):
        """Test that @lambda_handler runs an async function synchronously."""

        @lambda_handler
        async def handler(event, context):
            return {"Status": "SUCCESS", "Request": event["RequestId"]}

        result = handler(create_event, mock_lambda_context)
        assert result == {"Status": "SUCCESS", "Request": "req-1"}

    @pytest.mark.unit
    def test_lambda_handler_raises_on_sync_function(self):
        """Test that @lambda_handler raises TypeError for sync functions."""
        with pytest.raises(TypeError, match="can only be applied to async functions"):

            @lambda_handler
            def sync_handler(event, context):
                return {}

    @pytest.mark.unit
    def test_lambda_handler_preserves_function_metadata(self):
        """Test that decorator preserves function metadata."""

        @lambda_handler
        async def handler(event, context):
            """Test handler docstring."""
            return {}

        assert handler.__name__ == "handler"
        assert "Test handler docstring" in handler.__doc__

    @pytest.mark.unit
    def test_lambda_handler_propagates_exceptions(
        self, create_event, mock_lambda_context
    ):
        """Test that exceptions escape the synchronous wrapper."""

        @lambda_handler
        async def handler(event, context):
            raise ValueError("Test error")

        with pytest.raises(ValueError, match="Test error"):
            handler(create_event, mock_lambda_context)


@pytest.mark.requires_config
class TestWithConfig:
    """Tests for @with_config decorator."""

    @pytest.mark.unit
    def test_with_config_injects_settings(self, create_event, mock_lambda_context):
        @lambda_handler
        @with_config(settings_class=ResourceSettings)
        async def handler(event, context, settings):
            return {"level": settings.LOG_LEVEL}

        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            result = handler(create_event, mock_lambda_context)

        assert result == {"level": "DEBUG"}

    @pytest.mark.unit
    def test_with_config_default_settings_class(
        self, create_event, mock_lambda_context
    ):
        @lambda_handler
        @with_config
        async def handler(event, context, settings):
            return {"type": type(settings).__name__}

        result = handler(create_event, mock_lambda_context)
        assert result == {"type": Settings.__name__}

    @pytest.mark.unit
    def test_with_config_without_settings_param(
        self, create_event, mock_lambda_context
    ):
        @lambda_handler
        @with_config
        async def handler(event, context):
            return {"ok": True}

        assert handler(create_event, mock_lambda_context) == {"ok": True}

    @pytest.mark.unit
    def test_with_config_raises_on_sync_function(self):
        with pytest.raises(TypeError, match="@with_config"):

            @with_config
            def handler(event, context, settings):
                return {}


class TestWithHttpClient:
    """Tests for @with_http_client decorator."""

    @pytest.mark.unit
    def test_injects_client_from_factory(self, create_event, mock_lambda_context):
        transport = RecordingTransport()
        seen = []

        @lambda_handler
        @with_http_client(factory=transport.factory)
        async def handler(event, context, http_client):
            seen.append(http_client)
            response = await http_client.put(event["ResponseURL"], content=b"{}")
            return {"status": response.status_code}

        result = handler(create_event, mock_lambda_context)

        assert result == {"status": 200}
        assert len(transport.requests) == 1
        assert seen[0].is_closed

    @pytest.mark.unit
    def test_closes_client_when_handler_raises(
        self, create_event, mock_lambda_context
    ):
        transport = RecordingTransport()
        seen = []

        @lambda_handler
        @with_http_client(factory=transport.factory)
        async def handler(event, context, http_client):
            seen.append(http_client)
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            handler(create_event, mock_lambda_context)
        assert seen[0].is_closed

    @pytest.mark.unit
    def test_default_client_uses_settings_timeout(
        self, create_event, mock_lambda_context
    ):
        @lambda_handler
        @with_config(settings_class=ResourceSettings)
        @with_http_client
        async def handler(event, context, settings, http_client):
            return {"timeout": http_client.timeout}

        with patch.dict(os.environ, {"HTTP_TIMEOUT": "2.5"}):
            result = handler(create_event, mock_lambda_context)

        assert result["timeout"] == httpx.Timeout(2.5)

    @pytest.mark.unit
    def test_default_client_has_no_timeout(self, create_event, mock_lambda_context):
        @lambda_handler
        @with_http_client
        async def handler(event, context, http_client):
            return {"timeout": http_client.timeout}

        result = handler(create_event, mock_lambda_context)
        assert result["timeout"] == httpx.Timeout(None)

    @pytest.mark.unit
    def test_without_http_client_param(self, create_event, mock_lambda_context):
        @lambda_handler
        @with_http_client
        async def handler(event, context):
            return {"ok": True}

        assert handler(create_event, mock_lambda_context) == {"ok": True}
