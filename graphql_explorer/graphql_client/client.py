"""HTTP client for a single upstream GraphQL endpoint."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from .errors import UpstreamTransportError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.cloudflare.com/client/v4/graphql"


@dataclass(frozen=True)
class AccountScope:
    """Active account and the bearer credential used to act on its behalf."""

    account_id: str
    api_token: str


def graphql_errors(body: Any) -> List[str]:
    """Extract the messages of a GraphQL ``errors`` array (empty if none)."""
    if not isinstance(body, dict):
        return []
    errors = body.get("errors")
    if not isinstance(errors, list):
        return []
    return [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]


class GraphQLClient:
    """Issues one POST per call; nothing is kept between calls."""

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: GraphQL endpoint URL
            timeout_seconds: Transport timeout applied to every request
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _build_headers(self, scope: AccountScope) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {scope.api_token}",
        }

    async def execute(
        self,
        query: str,
        scope: AccountScope,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL request and return the parsed JSON body.

        GraphQL ``errors`` are logged but not raised; the caller still gets
        whatever ``data`` the upstream returned.

        Args:
            query: GraphQL document
            scope: Account scope supplying the bearer credential
            variables: Optional variables object

        Returns:
            Parsed response body ``{data?, errors?}``

        Raises:
            UpstreamTransportError: On network failure, non-2xx status or a non-JSON body
        """
        payload: Dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables

        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
            try:
                response = await client.post(self.endpoint, json=payload, headers=self._build_headers(scope))
            except httpx.HTTPError as e:
                raise UpstreamTransportError(f"Failed to execute GraphQL request: {e}") from e

        if not response.is_success:
            raise UpstreamTransportError(
                f"Failed to execute GraphQL request: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamTransportError(f"GraphQL endpoint returned invalid JSON: {e}") from e

        messages = graphql_errors(body)
        if messages:
            joined = ", ".join(messages)
            logger.warning(f"GraphQL errors: {joined}")
            if "Mutations are not supported" in joined:
                logger.info("Mutations are not supported by the upstream GraphQL API")

        return body
