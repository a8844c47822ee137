"""Serve command - starts the MCP server over stdio."""

import logging
import sys

from graphql_explorer.cli.config import Config

logger = logging.getLogger(__name__)


def serve_command(config: Config, verbose: bool = False):
    """Start MCP server for the configured GraphQL endpoint."""
    if verbose:
        logger.info(f"🚀 Starting {config.mcp_server_name}...")
        logger.info(f"🌐 Endpoint: {config.graphql_endpoint}")

    if config.account_scope() is None:
        # Tools still start and answer with an advisory until an account is set
        logger.warning("No active account: set GRAPHQL_ACCOUNT_ID and GRAPHQL_API_TOKEN")

    try:
        from graphql_explorer.mcp_server.server import start_server

        start_server(config)
    except ImportError as e:
        logger.error(f"Failed to import MCP server: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to start MCP server: {e}")
        sys.exit(1)
