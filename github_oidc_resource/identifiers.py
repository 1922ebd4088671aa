"""
Physical resource identifier encoding.

The orchestrator persists the physical resource id and replays it on every
later invocation, which makes it the only place the tracked organization id
survives between a Create and the Updates that follow.
"""

PHYSICAL_ID_PREFIX = "oidc-"


def encode_physical_id(tracked_org_id: str) -> str:
    """Build the physical resource id reported on Create."""
    return f"{PHYSICAL_ID_PREFIX}{tracked_org_id}"


def decode_physical_id(physical_id: str | None) -> str | None:
    """
    Extract the tracked organization id from a physical resource id.

    Args:
        physical_id: Value replayed by the orchestrator, possibly empty

    Returns:
        The embedded tracked org id, or None when the value is empty or was
        not produced by encode_physical_id (e.g. a log stream name fallback)
    """
    if not physical_id or not physical_id.startswith(PHYSICAL_ID_PREFIX):
        return None
    return physical_id[len(PHYSICAL_ID_PREFIX):] or None
