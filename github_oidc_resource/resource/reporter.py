"""
Delivery of the status report to the orchestrator.
"""

import logging

import httpx

from ..errors import ResponseDeliveryError
from ..models import ExecutionContext, LifecycleEvent, Outcome, StatusReport

logger = logging.getLogger(__name__)


def build_report(
    event: LifecycleEvent, context: ExecutionContext, outcome: Outcome
) -> StatusReport:
    """
    Assemble the status report for an outcome.

    The physical resource id is the one the outcome derived (Create), else
    the id the orchestrator replayed, else the log stream name.
    """
    physical_id = (
        outcome.physical_resource_id
        or event.physical_resource_id
        or context.log_stream_name
    )
    return StatusReport(
        status=outcome.status,
        reason=outcome.reason
        or f"See CloudWatch Log Stream: {context.log_stream_name}",
        physical_resource_id=physical_id,
        stack_id=event.stack_id,
        request_id=event.request_id,
        logical_resource_id=event.logical_resource_id,
        data=dict(outcome.data),
    )


class ResponseReporter:
    """
    PUTs the status report to the event's response URL.

    Args:
        client: Shared async HTTP client for the invocation
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def send(
        self, event: LifecycleEvent, context: ExecutionContext, outcome: Outcome
    ) -> StatusReport:
        """
        Build and deliver the report. Any completed response counts as delivered.

        Returns:
            The delivered report

        Raises:
            ResponseDeliveryError: If the response URL is malformed or the
                request fails at the transport level
        """
        report = build_report(event, context, outcome)
        body = report.to_json()
        logger.info(f"Response body: {body.decode('utf-8')}")

        # The presigned response URL is signed without a content type
        headers = {"Content-Type": "", "Content-Length": str(len(body))}
        try:
            response = await self.client.put(
                event.response_url, content=body, headers=headers
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Send response error: {e}")
            raise ResponseDeliveryError(
                f"Failed to deliver status report: {e}"
            ) from e

        logger.info(f"Status code: {response.status_code}")
        logger.info(f"Status message: {response.reason_phrase}")
        return report
