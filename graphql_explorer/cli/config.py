"""Configuration management for the GraphQL explorer."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from graphql_explorer.graphql_client import DEFAULT_ENDPOINT, AccountScope


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Upstream GraphQL
        self.graphql_endpoint = os.getenv("GRAPHQL_ENDPOINT", DEFAULT_ENDPOINT)
        self.graphql_timeout_seconds = float(os.getenv("GRAPHQL_TIMEOUT_SECONDS", "30"))

        # Active account
        self.account_id = os.getenv("GRAPHQL_ACCOUNT_ID", "")
        self.api_token = os.getenv("GRAPHQL_API_TOKEN", "")

        # Response limits
        self.response_size_limit = int(os.getenv("RESPONSE_SIZE_LIMIT", "900000"))
        self.search_max_details_to_fetch = int(os.getenv("SEARCH_MAX_DETAILS_TO_FETCH", "10"))

        # MCP Server
        self.mcp_server_name = os.getenv("MCP_SERVER_NAME", "GraphQL Explorer")

    def account_scope(self) -> Optional[AccountScope]:
        """Active account scope, or None when no account is selected."""
        if not self.account_id or not self.api_token:
            return None
        return AccountScope(account_id=self.account_id, api_token=self.api_token)
