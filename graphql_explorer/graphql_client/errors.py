"""Error taxonomy for upstream GraphQL calls."""

from typing import List, Optional


class GraphQLExplorerError(Exception):
    """Base class for errors raised by the explorer."""


class UpstreamTransportError(GraphQLExplorerError):
    """Non-success HTTP status, network failure or unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamGraphQLError(GraphQLExplorerError):
    """Upstream answered with an errors array and no usable data."""

    def __init__(self, messages: List[str]):
        self.messages = messages
        super().__init__(", ".join(messages) or "GraphQL response contained no data")
