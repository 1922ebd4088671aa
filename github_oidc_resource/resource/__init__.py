"""
Lifecycle branches of the GitHub OIDC custom resource.
"""

from .dispatch import LifecycleDispatcher
from .guard import ensure_tracked_org_unchanged
from .notifier import ExternalNotifier, NotificationPayload
from .reporter import ResponseReporter, build_report

__all__ = [
    "ExternalNotifier",
    "LifecycleDispatcher",
    "NotificationPayload",
    "ResponseReporter",
    "build_report",
    "ensure_tracked_org_unchanged",
]
