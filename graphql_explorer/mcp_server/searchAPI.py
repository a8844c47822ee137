"""Schema search tool implementation for MCP server."""

import logging
from typing import Optional

from graphql_explorer.graphql_client import AccountScope, GraphQLClient
from graphql_explorer.schema import SchemaSearchEngine

from .response_assembler import (NO_ACTIVE_ACCOUNT_MESSAGE, check_range,
                                 error_response, success_response)

logger = logging.getLogger(__name__)


async def searchSchemaAPI(
    client: GraphQLClient,
    scope: Optional[AccountScope],
    keyword: str,
    max_details_to_fetch: int = 10,
    include_internal_types: bool = False,
) -> str:
    """
    Search the schema for types, fields, arguments and enum values matching a keyword.

    Args:
        client: Upstream GraphQL client
        scope: Active account scope, None if no account is selected
        keyword: Case-insensitive substring to search for
        max_details_to_fetch: How many types to inspect field by field (1-50)
        include_internal_types: Keep ``__``-prefixed introspection types

    Returns:
        JSON text ``{keyword, summary, results}``, an ``{error}`` object, or
        the no-active-account advisory
    """
    if scope is None:
        return NO_ACTIVE_ACCOUNT_MESSAGE

    try:
        check_range("maxDetailsToFetch", max_details_to_fetch, 1, 50)

        engine = SchemaSearchEngine(client, scope)
        result = await engine.search(
            keyword,
            max_details_to_fetch=max_details_to_fetch,
            include_internal_types=include_internal_types,
        )
        return success_response(result.to_dict())
    except Exception as e:
        logger.error(f"Schema search for '{keyword}' failed: {e}")
        return error_response("Error searching GraphQL schema", e)
