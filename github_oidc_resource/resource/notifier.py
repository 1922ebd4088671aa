"""
Create-time notification of the provisioned OIDC identifiers.
"""

import json
import logging

import httpx
from pydantic import BaseModel, ConfigDict

from ..errors import CallbackError

logger = logging.getLogger(__name__)


class NotificationPayload(BaseModel):
    """JSON body POSTed to the callback URL."""

    model_config = ConfigDict(frozen=True)

    githubOrg: str | None = None
    trackedOrgId: str
    roleArn: str | None = None
    oidcProviderArn: str | None = None
    repositoryName: str | None = None
    stackId: str


class ExternalNotifier:
    """
    Best-effort POST of newly created resource attributes to an external service.

    Args:
        client: Shared async HTTP client for the invocation
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def notify(self, url: str, payload: NotificationPayload) -> str:
        """
        POST the payload as JSON.

        Returns:
            Response body when the callback answers with a 2xx status

        Raises:
            CallbackError: On a non-2xx status, a malformed URL or a transport
                failure
        """
        body = payload.model_dump_json().encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }

        logger.info(f"Calling callback: {url}")
        logger.info(f"Payload: {json.dumps(payload.model_dump(), indent=2)}")

        try:
            response = await self.client.post(url, content=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Callback request error: {e}")
            raise CallbackError(None, str(e) or type(e).__name__) from e

        logger.info(f"Callback response status: {response.status_code}")
        logger.info(f"Callback response body: {response.text}")

        if not 200 <= response.status_code < 300:
            raise CallbackError(response.status_code, response.text)
        return response.text
