"""FastMCP server exposing GraphQL schema exploration and query tools."""

from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from graphql_explorer.cli.config import Config
from graphql_explorer.utils.logging_config import setup_logging

from .queryAPI import accountAnalyticsQueryAPI, queryAPI, zoneAnalyticsQueryAPI
from .schemaAPI import fullSchemaAPI, schemaOverviewAPI, typeDetailsAPI
from .searchAPI import searchSchemaAPI
from .shared_resources import get_shared_resources, initialize_shared_resources

# Setup logging for MCP (silent mode - ERROR level only)
setup_logging(verbose=False)

# Create MCP server
mcp = FastMCP("GraphQL Explorer")

# Tool parameter names are camelCase to match the published tool contract.


@mcp.tool()
async def graphql_schema_search(
    keyword: str,
    maxDetailsToFetch: Optional[int] = None,
    includeInternalTypes: bool = False,
) -> str:
    """
    Search the GraphQL API schema for types, fields, arguments and enum values matching a keyword.

    Type names and descriptions are searched across the whole schema. Fields,
    arguments and enum values are searched only in a bounded set of types:
    the matching types first, then the root query/mutation/subscription types,
    then other object and interface types.

    Args:
        keyword: The keyword to search for in the schema (case-insensitive)
        maxDetailsToFetch: Maximum number of types to fetch details for (1-50),
            defaults to the SEARCH_MAX_DETAILS_TO_FETCH setting
        includeInternalTypes: Whether to include internal types (those starting with __)

    Returns:
        JSON with the keyword, match counts per category, and the matches
    """
    resources = get_shared_resources()
    if maxDetailsToFetch is None:
        maxDetailsToFetch = resources.search_max_details_to_fetch()
    return await searchSchemaAPI(
        resources.client,
        resources.active_scope(),
        keyword=keyword,
        max_details_to_fetch=maxDetailsToFetch,
        include_internal_types=includeInternalTypes,
    )


@mcp.tool()
async def graphql_schema_overview(pageSize: int = 100, page: int = 1) -> str:
    """
    Fetch the high-level overview of the GraphQL API schema.

    Args:
        pageSize: Number of types to return per page (10-1000)
        page: Page number to fetch

    Returns:
        Root operation type names and one page of the type list with pagination metadata
    """
    resources = get_shared_resources()
    return await schemaOverviewAPI(resources.client, resources.active_scope(), page_size=pageSize, page=page)


@mcp.tool()
async def graphql_type_details(
    typeName: str,
    fieldsPageSize: int = 50,
    fieldsPage: int = 1,
    enumValuesPageSize: int = 50,
    enumValuesPage: int = 1,
) -> str:
    """
    Fetch detailed information about a specific GraphQL type.

    Args:
        typeName: The name of the GraphQL type to fetch details for
        fieldsPageSize: Number of fields to return per page (5-500)
        fieldsPage: Page number for fields to fetch
        enumValuesPageSize: Number of enum values to return per page (5-500)
        enumValuesPage: Page number for enum values to fetch

    Returns:
        The type with paginated fields and enum values
    """
    resources = get_shared_resources()
    return await typeDetailsAPI(
        resources.client,
        resources.active_scope(),
        type_name=typeName,
        fields_page_size=fieldsPageSize,
        fields_page=fieldsPage,
        enum_values_page_size=enumValuesPageSize,
        enum_values_page=enumValuesPage,
    )


@mcp.tool()
async def graphql_schema(
    typesPageSize: int = 100,
    typesPage: int = 1,
    includeRootTypeDetails: bool = True,
    maxTypeDetailsToFetch: int = 3,
) -> str:
    """
    Fetch the GraphQL API schema: a page of the type list plus root type details.

    Args:
        typesPageSize: Number of types to return per page (10-500)
        typesPage: Page number for types to fetch
        includeRootTypeDetails: Whether to include detailed information about root types
        maxTypeDetailsToFetch: Maximum number of root types to fetch details for (0-10)

    Returns:
        Paginated type list and a map of root type details
    """
    resources = get_shared_resources()
    return await fullSchemaAPI(
        resources.client,
        resources.active_scope(),
        types_page_size=typesPageSize,
        types_page=typesPage,
        include_root_type_details=includeRootTypeDetails,
        max_type_details_to_fetch=maxTypeDetailsToFetch,
    )


@mcp.tool()
async def graphql_query(
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    paginationPath: Optional[str] = None,
    pageSize: Optional[int] = None,
    page: Optional[int] = None,
) -> str:
    """
    Execute a GraphQL query against the API with pagination support.

    Large results are refused with an advisory; use paginationPath, pageSize
    and page to fetch an array from the response one window at a time.

    Args:
        query: The GraphQL query to execute
        variables: Variables for the query
        paginationPath: JSON path to the array that needs pagination (e.g., "data.viewer.zones")
        pageSize: Number of items per page (1-1000)
        page: Page number to fetch

    Returns:
        The upstream JSON response, paginated at paginationPath when given
    """
    resources = get_shared_resources()
    return await queryAPI(
        resources.client,
        resources.active_scope(),
        query=query,
        variables=variables,
        pagination_path=paginationPath,
        page_size=pageSize,
        page=page,
        size_limit=resources.response_size_limit(),
    )


@mcp.tool()
async def generate_zone_analytics_query(
    zoneId: str,
    metric: str,
    timeRange: Dict[str, str],
    dimensions: Optional[List[str]] = None,
    filters: Optional[Dict[str, str]] = None,
    limit: int = 100,
) -> str:
    """
    Generate a GraphQL query for zone analytics.

    Args:
        zoneId: The zone ID to query
        metric: The metric to query (e.g., requests, bytes, threats)
        timeRange: Object with "since" and "until" ISO timestamps
        dimensions: Dimensions to group by
        filters: Filters to apply to the query (override the date bounds on conflict)
        limit: Maximum number of results to return (1-10000)

    Returns:
        JSON with the query text and its variables (not executed)
    """
    return zoneAnalyticsQueryAPI(zoneId, metric, timeRange, dimensions, filters, limit)


@mcp.tool()
async def generate_account_analytics_query(
    accountId: str,
    metric: str,
    timeRange: Dict[str, str],
    dimensions: Optional[List[str]] = None,
    filters: Optional[Dict[str, str]] = None,
    limit: int = 100,
) -> str:
    """
    Generate a GraphQL query for account-level analytics.

    Args:
        accountId: The account ID to query
        metric: The metric to query (e.g., requests, bytes, threats)
        timeRange: Object with "since" and "until" ISO timestamps
        dimensions: Dimensions to group by
        filters: Filters to apply to the query (override the date bounds on conflict)
        limit: Maximum number of results to return (1-10000)

    Returns:
        JSON with the query text and its variables (not executed)
    """
    return accountAnalyticsQueryAPI(accountId, metric, timeRange, dimensions, filters, limit)


def start_server(config: Config):
    """Start MCP server over stdio."""
    initialize_shared_resources(config)
    mcp.run()


if __name__ == "__main__":
    # Load config for standalone execution
    config = Config()
    start_server(config)
