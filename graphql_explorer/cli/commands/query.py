"""Query command - execute a GraphQL query from command line."""

import functools
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from graphql_explorer.cli.config import Config
from graphql_explorer.mcp_server.queryAPI import queryAPI

from ._runner import run_tool

logger = logging.getLogger(__name__)


def query_command(
    config: Config,
    query: str,
    variables: Optional[str] = None,
    pagination_path: Optional[str] = None,
    page_size: Optional[int] = None,
    page: Optional[int] = None,
    verbose: bool = False,
):
    """
    Execute a query and print the result.

    ``query`` may be the document itself or ``@path`` to a file holding it;
    ``variables`` is a JSON object string.
    """
    if query.startswith("@"):
        query_path = Path(query[1:])
        if not query_path.exists():
            logger.error(f"❌ Query file not found: {query_path}")
            sys.exit(1)
        query = query_path.read_text()

    parsed_variables = None
    if variables:
        try:
            parsed_variables = json.loads(variables)
        except ValueError as e:
            logger.error(f"❌ Variables are not valid JSON: {e}")
            sys.exit(1)

    if verbose and pagination_path:
        logger.info(f"📄 Paginating {pagination_path}: page {page or 1}, page size {page_size or 'all'}")

    run_tool(
        config,
        functools.partial(
            queryAPI,
            query=query,
            variables=parsed_variables,
            pagination_path=pagination_path,
            page_size=page_size,
            page=page,
            size_limit=config.response_size_limit,
        ),
    )
