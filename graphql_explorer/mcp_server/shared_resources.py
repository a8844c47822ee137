"""Shared resources for MCP server - configuration and the upstream client."""

from typing import Optional

from graphql_explorer.cli.config import Config
from graphql_explorer.graphql_client import AccountScope, GraphQLClient
from graphql_explorer.pagination import DEFAULT_RESPONSE_SIZE_LIMIT
from graphql_explorer.schema import DEFAULT_MAX_DETAILS_TO_FETCH


class SharedResources:
    """Holds what every tool call needs; per-call state is never stored here."""

    def __init__(self):
        self.config: Optional[Config] = None
        self.client: Optional[GraphQLClient] = None

    def load_from_config(self, config: Config):
        """Load shared resources from configuration."""
        self.config = config
        self.client = GraphQLClient(
            endpoint=config.graphql_endpoint,
            timeout_seconds=config.graphql_timeout_seconds,
        )

    def is_ready(self) -> bool:
        """Check if resources are loaded."""
        return self.config is not None and self.client is not None

    def active_scope(self) -> Optional[AccountScope]:
        """Resolve the active account; None when none is selected."""
        if self.config is None:
            return None
        return self.config.account_scope()

    def response_size_limit(self) -> int:
        if self.config is None:
            return DEFAULT_RESPONSE_SIZE_LIMIT
        return self.config.response_size_limit

    def search_max_details_to_fetch(self) -> int:
        if self.config is None:
            return DEFAULT_MAX_DETAILS_TO_FETCH
        return self.config.search_max_details_to_fetch


# Global shared resources instance
_shared_resources = SharedResources()


def get_shared_resources() -> SharedResources:
    """Get the global shared resources instance."""
    return _shared_resources


def initialize_shared_resources(config: Config):
    """Initialize shared resources from configuration."""
    _shared_resources.load_from_config(config)
