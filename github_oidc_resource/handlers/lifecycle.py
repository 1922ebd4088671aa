"""
Invocation lifecycle management.

Wraps each invocation with start/finish logging keyed by the request id.
"""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lambda_lifecycle(context: Any = None) -> AsyncIterator[None]:
    """
    Context manager for a single Lambda invocation.

    Logs the elapsed time when the invocation ends, successfully or not.

    Args:
        context: Lambda context object, used for the request id in log lines

    Example:
        async with lambda_lifecycle(context):
            # Your handler logic here
            pass
    """
    request_id = getattr(context, "aws_request_id", None) or "unknown"
    started = time.monotonic()
    logger.debug(f"Invocation {request_id} started")
    try:
        yield
    except Exception as e:
        logger.error(f"Invocation {request_id} failed: {e}")
        raise
    finally:
        elapsed_ms = (time.monotonic() - started) * 1000
        logger.info(f"Invocation {request_id} finished in {elapsed_ms:.1f} ms")
