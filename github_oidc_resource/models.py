"""
Typed models for lifecycle events, outcomes and status reports.

Wire keys use the orchestrator's PascalCase names; attributes are snake_case.
"""

import datetime
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError


class RequestType(str, Enum):
    """Lifecycle operations issued by the orchestrator."""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


class Status(str, Enum):
    """Outcome reported back to the orchestrator."""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class ResourceProperties(BaseModel):
    """Properties declared on the custom resource in the template."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    tracked_org_id: str = Field(alias="TrackedOrgId", min_length=1)
    github_org: str | None = Field(default=None, alias="GitHubOrg")
    repository_name: str | None = Field(default=None, alias="RepositoryName")
    oidc_provider_arn: str | None = Field(default=None, alias="OIDCProviderArn")
    role_arn: str | None = Field(default=None, alias="RoleArn")
    callback_url: str | None = Field(default=None, alias="CallbackUrl")

    @field_validator("callback_url")
    @classmethod
    def blank_url_is_absent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class LifecycleEvent(BaseModel):
    """Envelope of a single Create, Update or Delete invocation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # Kept as a plain string so unknown types still reach the reporter
    request_type: str = Field(alias="RequestType")
    response_url: str = Field(alias="ResponseURL", min_length=1)
    stack_id: str = Field(alias="StackId")
    request_id: str = Field(alias="RequestId")
    logical_resource_id: str = Field(alias="LogicalResourceId")
    physical_resource_id: str | None = Field(default=None, alias="PhysicalResourceId")
    resource_type: str | None = Field(default=None, alias="ResourceType")
    service_token: str | None = Field(default=None, alias="ServiceToken")
    resource_properties: dict[str, Any] = Field(
        default_factory=dict, alias="ResourceProperties"
    )
    old_resource_properties: dict[str, Any] | None = Field(
        default=None, alias="OldResourceProperties"
    )

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "LifecycleEvent":
        """
        Parse the raw Lambda event.

        Raises:
            ConfigurationError: If the envelope is missing required fields
        """
        try:
            return cls.model_validate(event)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid lifecycle event: {e}") from e

    def properties(self) -> ResourceProperties:
        """
        Parse and validate the resource properties.

        Raises:
            ConfigurationError: If a required property is missing or empty
        """
        try:
            return ResourceProperties.model_validate(self.resource_properties)
        except ValidationError as e:
            missing = ", ".join(
                str(err["loc"][0]) for err in e.errors() if err.get("loc")
            )
            raise ConfigurationError(
                f"Invalid resource properties ({missing}): {e.error_count()} error(s)"
            ) from e


@dataclass(frozen=True)
class ExecutionContext:
    """The parts of the Lambda context the handler relies on."""

    log_stream_name: str
    aws_request_id: str | None = None

    @classmethod
    def from_lambda_context(cls, context: Any) -> "ExecutionContext":
        return cls(
            log_stream_name=getattr(context, "log_stream_name", None) or "unknown",
            aws_request_id=getattr(context, "aws_request_id", None),
        )


@dataclass(frozen=True)
class Outcome:
    """Result of one lifecycle branch, assembled into the status report."""

    status: Status
    reason: str
    data: Mapping[str, Any] = field(default_factory=dict)
    physical_resource_id: str | None = None

    @classmethod
    def success(
        cls,
        reason: str,
        data: Mapping[str, Any],
        physical_resource_id: str | None = None,
    ) -> "Outcome":
        return cls(Status.SUCCESS, reason, dict(data), physical_resource_id)

    @classmethod
    def failed(cls, reason: str) -> "Outcome":
        return cls(Status.FAILED, reason, {"Error": reason})


class StatusReport(BaseModel):
    """Document PUT to the orchestrator's response URL."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: Status = Field(serialization_alias="Status")
    reason: str = Field(serialization_alias="Reason")
    physical_resource_id: str = Field(serialization_alias="PhysicalResourceId")
    stack_id: str = Field(serialization_alias="StackId")
    request_id: str = Field(serialization_alias="RequestId")
    logical_resource_id: str = Field(serialization_alias="LogicalResourceId")
    data: dict[str, Any] = Field(default_factory=dict, serialization_alias="Data")

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


def utc_timestamp(now: datetime.datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.datetime.now(datetime.UTC)
    return (
        now.astimezone(datetime.UTC)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
