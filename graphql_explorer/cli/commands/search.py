"""Search command - test schema search from command line."""

import functools
import logging

from graphql_explorer.cli.config import Config
from graphql_explorer.mcp_server.searchAPI import searchSchemaAPI

from ._runner import run_tool

logger = logging.getLogger(__name__)


def search_command(
    config: Config,
    keyword: str,
    max_details_to_fetch: int = 10,
    include_internal_types: bool = False,
    verbose: bool = False,
):
    """Search the schema for a keyword and print the matches."""
    if verbose:
        logger.info(f"🔍 Keyword: {keyword}")
        logger.info(
            f"⚙️  Settings: max_details_to_fetch={max_details_to_fetch}, "
            f"include_internal_types={include_internal_types}"
        )

    run_tool(
        config,
        functools.partial(
            searchSchemaAPI,
            keyword=keyword,
            max_details_to_fetch=max_details_to_fetch,
            include_internal_types=include_internal_types,
        ),
    )
