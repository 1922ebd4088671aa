"""
Dispatch of lifecycle events to the Create, Update and Delete branches.

Each branch returns an Outcome; nothing is accumulated across branches.
Every exception except a callback failure ends the invocation as FAILED.
"""

import datetime
import logging
from collections.abc import Callable

from ..config.settings import DEFAULT_CALLBACK_WARNING
from ..errors import CallbackError, ErrorHandler, UnsupportedRequestTypeError
from ..identifiers import encode_physical_id
from ..models import LifecycleEvent, Outcome, RequestType, ResourceProperties, utc_timestamp
from .guard import ensure_tracked_org_unchanged
from .notifier import ExternalNotifier, NotificationPayload

logger = logging.getLogger(__name__)

CREATE_MESSAGE = "GitHub OIDC setup completed successfully"
UPDATE_MESSAGE = "GitHub OIDC configuration updated successfully"
DELETE_MESSAGE = "GitHub OIDC cleanup completed successfully"

CREATE_REASON = "Custom resource creation completed successfully"
UPDATE_REASON = "Custom resource update completed successfully"
DELETE_REASON = "Custom resource deletion completed successfully"


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


class LifecycleDispatcher:
    """
    Runs the branch matching an event's request type.

    Args:
        notifier: Notifier used for the optional Create-time callback
        callback_warning: Text attached as CallbackWarning when it fails
        error_handler: Classifies and logs errors (default: a fresh ErrorHandler)
        clock: Source of the Create timestamp
    """

    def __init__(
        self,
        notifier: ExternalNotifier,
        callback_warning: str = DEFAULT_CALLBACK_WARNING,
        error_handler: ErrorHandler | None = None,
        clock: Callable[[], datetime.datetime] = _utc_now,
    ) -> None:
        self.notifier = notifier
        self.callback_warning = callback_warning
        self.error_handler = error_handler or ErrorHandler()
        self.clock = clock

    async def dispatch(self, event: LifecycleEvent) -> Outcome:
        """Run the matching branch; never raises."""
        try:
            try:
                request_type = RequestType(event.request_type)
            except ValueError:
                raise UnsupportedRequestTypeError(event.request_type) from None

            properties = event.properties()

            if request_type is RequestType.CREATE:
                return await self._on_create(event, properties)
            if request_type is RequestType.UPDATE:
                return self._on_update(event, properties)
            return self._on_delete()
        except Exception as e:
            error = self.error_handler.handle_error(
                e,
                {
                    "request_type": event.request_type,
                    "logical_resource_id": event.logical_resource_id,
                },
            )
            return Outcome.failed(error.message)

    async def _on_create(
        self, event: LifecycleEvent, properties: ResourceProperties
    ) -> Outcome:
        logger.info("Stack creation - Running custom setup logic")
        logger.info(f"GitHub Org: {properties.github_org}")
        logger.info(f"Tracked Org Id: {properties.tracked_org_id}")
        logger.info(f"Repository: {properties.repository_name}")
        logger.info(f"OIDC Provider ARN: {properties.oidc_provider_arn}")
        logger.info(f"Role ARN: {properties.role_arn}")
        logger.info(f"Callback URL: {properties.callback_url}")

        warning = None
        if properties.callback_url:
            payload = NotificationPayload(
                githubOrg=properties.github_org,
                trackedOrgId=properties.tracked_org_id,
                roleArn=properties.role_arn,
                oidcProviderArn=properties.oidc_provider_arn,
                repositoryName=properties.repository_name,
                stackId=event.stack_id,
            )
            try:
                await self.notifier.notify(properties.callback_url, payload)
                logger.info("Successfully called callback API")
            except CallbackError as e:
                # The role ARN can still be configured by hand
                self.error_handler.handle_error(
                    e, {"callback_url": properties.callback_url}
                )
                warning = self.callback_warning

        data = {
            "Message": CREATE_MESSAGE,
            "GitHubOrg": properties.github_org,
            "TrackedOrgId": properties.tracked_org_id,
            "RepositoryName": properties.repository_name,
            "Timestamp": utc_timestamp(self.clock()),
        }
        if warning:
            data["CallbackWarning"] = warning

        return Outcome.success(
            CREATE_REASON,
            data,
            physical_resource_id=encode_physical_id(properties.tracked_org_id),
        )

    def _on_update(
        self, event: LifecycleEvent, properties: ResourceProperties
    ) -> Outcome:
        logger.info("Stack update - Running update logic")
        ensure_tracked_org_unchanged(
            event.physical_resource_id, properties.tracked_org_id
        )
        return Outcome.success(
            UPDATE_REASON,
            {"Message": UPDATE_MESSAGE, "TrackedOrgId": properties.tracked_org_id},
        )

    def _on_delete(self) -> Outcome:
        logger.info("Stack deletion - Running cleanup logic")
        return Outcome.success(DELETE_REASON, {"Message": DELETE_MESSAGE})
