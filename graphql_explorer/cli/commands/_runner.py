"""Shared plumbing for commands that call a tool function from the terminal."""

import asyncio
import json
import logging
import sys
from typing import Awaitable, Callable

from graphql_explorer.cli.config import Config
from graphql_explorer.mcp_server.response_assembler import \
    NO_ACTIVE_ACCOUNT_MESSAGE
from graphql_explorer.mcp_server.shared_resources import (
    get_shared_resources, initialize_shared_resources)

logger = logging.getLogger(__name__)


def run_tool(config: Config, call: Callable[..., Awaitable[str]]):
    """
    Initialize shared resources, run one tool call and print its text payload.

    Exits with status 1 when the tool reports an error or no account is active.
    """
    initialize_shared_resources(config)
    resources = get_shared_resources()

    response = asyncio.run(call(resources.client, resources.active_scope()))

    if response == NO_ACTIVE_ACCOUNT_MESSAGE:
        logger.error(f"❌ {response}")
        sys.exit(1)

    try:
        parsed = json.loads(response)
    except ValueError:
        # Plain-text advisories
        print(response)
        return

    if isinstance(parsed, dict) and set(parsed) == {"error"}:
        logger.error(f"❌ {parsed['error']}")
        sys.exit(1)

    print(json.dumps(parsed, indent=2))
