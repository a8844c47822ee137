"""Uniform text payloads returned by every tool."""

import json
from typing import Any, Optional

NO_ACTIVE_ACCOUNT_MESSAGE = (
    "No currently active accountId. Set GRAPHQL_ACCOUNT_ID and GRAPHQL_API_TOKEN "
    "in the environment or .env file to select an active account."
)


def success_response(payload: Any) -> str:
    """Serialize a successful tool result."""
    return json.dumps(payload)


def error_response(context: str, error: Exception) -> str:
    """Render a failure as ``{"error": "<context>: <message>"}``."""
    return json.dumps({"error": f"{context}: {error}"})


def check_range(name: str, value: Optional[int], minimum: int, maximum: Optional[int] = None):
    """
    Enforce a tool parameter's bounds.

    Raises:
        ValueError: If value is outside [minimum, maximum]
    """
    if value is None:
        return
    if maximum is None:
        if value < minimum:
            raise ValueError(f"{name} must be >= {minimum}, got {value}")
    elif not minimum <= value <= maximum:
        raise ValueError(f"{name} must be between {minimum} and {maximum}, got {value}")
