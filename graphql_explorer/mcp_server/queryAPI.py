"""Ad-hoc query execution and analytics query generation tools."""

import logging
from typing import Any, Dict, List, Optional

from graphql_explorer.analytics import (TimeRange,
                                        build_account_analytics_query,
                                        build_zone_analytics_query)
from graphql_explorer.graphql_client import AccountScope, GraphQLClient
from graphql_explorer.pagination import (DEFAULT_RESPONSE_SIZE_LIMIT,
                                         guard_response_size, paginate_at_path)

from .response_assembler import (NO_ACTIVE_ACCOUNT_MESSAGE, check_range,
                                 error_response, success_response)

logger = logging.getLogger(__name__)


async def queryAPI(
    client: GraphQLClient,
    scope: Optional[AccountScope],
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    pagination_path: Optional[str] = None,
    page_size: Optional[int] = None,
    page: Optional[int] = None,
    size_limit: int = DEFAULT_RESPONSE_SIZE_LIMIT,
) -> str:
    """
    Execute a caller-supplied GraphQL query.

    When ``pagination_path`` leads to an array in the response, only the
    requested window of it is returned and a ``_pagination`` block is
    attached. The serialized result is replaced by an advisory if it exceeds
    ``size_limit``.

    Args:
        client: Upstream GraphQL client
        scope: Active account scope, None if no account is selected
        query: GraphQL document to execute
        variables: Optional query variables
        pagination_path: Dotted path to the array to paginate, e.g. ``data.viewer.zones``
        page_size: Items per page (1-1000), defaults to the whole array
        page: 1-indexed page number, defaults to 1
        size_limit: Maximum serialized length before the advisory kicks in

    Returns:
        Upstream JSON text, the size advisory, an ``{error}`` object, or the
        no-active-account advisory
    """
    if scope is None:
        return NO_ACTIVE_ACCOUNT_MESSAGE

    try:
        check_range("pageSize", page_size, 1, 1000)
        check_range("page", page, 1)

        result = await client.execute(query, scope, variables=variables or {})

        if pagination_path:
            result, window = paginate_at_path(result, pagination_path, page=page, page_size=page_size)
            if window is not None:
                result["_pagination"] = window.to_dict(total_key="totalItems")
            else:
                logger.info(f"No array at pagination path {pagination_path}, returning full result")

        return guard_response_size(result, limit=size_limit)
    except Exception as e:
        logger.error(f"GraphQL query failed: {e}")
        return error_response("Error executing GraphQL query", e)


def zoneAnalyticsQueryAPI(
    zone_id: str,
    metric: str,
    time_range: Dict[str, str],
    dimensions: Optional[List[str]] = None,
    filters: Optional[Dict[str, Any]] = None,
    limit: int = 100,
) -> str:
    """Generate (not execute) a zone analytics query and its variables."""
    try:
        return success_response(
            build_zone_analytics_query(
                zone_id, metric, TimeRange.from_dict(time_range), dimensions, filters, limit
            )
        )
    except (KeyError, ValueError) as e:
        return error_response("Error generating zone analytics query", e)


def accountAnalyticsQueryAPI(
    account_id: str,
    metric: str,
    time_range: Dict[str, str],
    dimensions: Optional[List[str]] = None,
    filters: Optional[Dict[str, Any]] = None,
    limit: int = 100,
) -> str:
    """Generate (not execute) an account analytics query and its variables."""
    try:
        return success_response(
            build_account_analytics_query(
                account_id, metric, TimeRange.from_dict(time_range), dimensions, filters, limit
            )
        )
    except (KeyError, ValueError) as e:
        return error_response("Error generating account analytics query", e)
