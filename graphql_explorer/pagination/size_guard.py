"""Keeps ad-hoc query results under the transport payload ceiling."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

# The transport rejects payloads around 1MB; leave room for the envelope
DEFAULT_RESPONSE_SIZE_LIMIT = 900_000

OVERSIZED_RESULT_MESSAGE = (
    "The query result is very large and approaching the 1MB response limit. "
    "Please use pagination by providing paginationPath, pageSize, and page parameters."
)


def guard_response_size(payload: Any, limit: int = DEFAULT_RESPONSE_SIZE_LIMIT) -> str:
    """
    Serialize ``payload``, or return an advisory if it is too large.

    Args:
        payload: JSON-serializable result
        limit: Maximum serialized length in characters

    Returns:
        Serialized JSON, or OVERSIZED_RESULT_MESSAGE when it exceeds ``limit``
    """
    serialized = json.dumps(payload)
    if len(serialized) > limit:
        logger.warning(f"Result of {len(serialized)} characters exceeds limit of {limit}, returning advisory")
        return OVERSIZED_RESULT_MESSAGE
    return serialized
