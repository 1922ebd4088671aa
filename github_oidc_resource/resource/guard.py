"""
Immutability check for the tracked organization on Update.
"""

import logging

from ..errors import ImmutableIdentifierError
from ..identifiers import decode_physical_id

logger = logging.getLogger(__name__)


def ensure_tracked_org_unchanged(
    previous_physical_id: str | None, tracked_org_id: str
) -> None:
    """
    Reject an update that would rebind the resource to another organization.

    Args:
        previous_physical_id: Physical resource id replayed by the orchestrator
        tracked_org_id: TrackedOrgId carried by the Update event

    Raises:
        ImmutableIdentifierError: If the id recorded at creation differs
    """
    original = decode_physical_id(previous_physical_id)
    if original is None:
        logger.info(
            f"No tracked org id recorded in {previous_physical_id!r}; skipping check"
        )
        return
    if original != tracked_org_id:
        raise ImmutableIdentifierError(original, tracked_org_id)
    logger.info(f"TrackedOrgId {tracked_org_id} unchanged")
