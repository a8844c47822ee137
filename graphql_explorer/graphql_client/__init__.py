"""Transport client for the upstream GraphQL endpoint."""

from .client import DEFAULT_ENDPOINT, AccountScope, GraphQLClient, graphql_errors
from .errors import (GraphQLExplorerError, UpstreamGraphQLError,
                     UpstreamTransportError)

__all__ = [
    "AccountScope",
    "DEFAULT_ENDPOINT",
    "GraphQLClient",
    "GraphQLExplorerError",
    "UpstreamGraphQLError",
    "UpstreamTransportError",
    "graphql_errors",
]
