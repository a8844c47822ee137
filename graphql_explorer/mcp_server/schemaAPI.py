"""Paginated schema tools: overview, single type details, combined schema."""

import logging
from typing import Any, Dict, Optional

from graphql_explorer.graphql_client import AccountScope, GraphQLClient
from graphql_explorer.pagination import paginate
from graphql_explorer.schema import fetch_schema_overview, fetch_type_details

from .response_assembler import (NO_ACTIVE_ACCOUNT_MESSAGE, check_range,
                                 error_response, success_response)

logger = logging.getLogger(__name__)


async def schemaOverviewAPI(
    client: GraphQLClient,
    scope: Optional[AccountScope],
    page_size: int = 100,
    page: int = 1,
) -> str:
    """
    Return one page of the flat type list plus the root operation type names.

    Args:
        client: Upstream GraphQL client
        scope: Active account scope, None if no account is selected
        page_size: Types per page (10-1000)
        page: 1-indexed page number

    Returns:
        JSON text ``{data: {__schema}, pagination}``, an ``{error}`` object, or
        the no-active-account advisory
    """
    if scope is None:
        return NO_ACTIVE_ACCOUNT_MESSAGE

    try:
        check_range("pageSize", page_size, 10, 1000)
        check_range("page", page, 1)

        overview = await fetch_schema_overview(client, scope)
        window = paginate(overview.types, page, page_size)

        return success_response(
            {
                "data": {
                    "__schema": {
                        **overview.root_types_dict(),
                        "types": [t.to_dict() for t in window.items],
                    }
                },
                "pagination": window.to_dict(total_key="totalTypes"),
            }
        )
    except Exception as e:
        logger.error(f"Schema overview failed: {e}")
        return error_response("Error fetching GraphQL schema overview", e)


async def typeDetailsAPI(
    client: GraphQLClient,
    scope: Optional[AccountScope],
    type_name: str,
    fields_page_size: int = 50,
    fields_page: int = 1,
    enum_values_page_size: int = 50,
    enum_values_page: int = 1,
) -> str:
    """
    Return one type with its fields and enum values paginated independently.

    An unknown type yields ``__type: null`` with empty pagination blocks.
    """
    if scope is None:
        return NO_ACTIVE_ACCOUNT_MESSAGE

    try:
        check_range("fieldsPageSize", fields_page_size, 5, 500)
        check_range("fieldsPage", fields_page, 1)
        check_range("enumValuesPageSize", enum_values_page_size, 5, 500)
        check_range("enumValuesPage", enum_values_page, 1)

        type_details = await fetch_type_details(client, scope, type_name)

        fields = (type_details.fields or []) if type_details else []
        enum_values = (type_details.enum_values or []) if type_details else []
        fields_window = paginate(fields, fields_page, fields_page_size)
        enum_window = paginate(enum_values, enum_values_page, enum_values_page_size)

        type_payload = None
        if type_details is not None:
            type_payload = {
                **type_details.to_dict(),
                "fields": [f.to_dict() for f in fields_window.items],
                "enumValues": [v.to_dict() for v in enum_window.items],
            }

        return success_response(
            {
                "data": {"__type": type_payload},
                "pagination": {
                    "fields": fields_window.to_dict(total_key="totalFields"),
                    "enumValues": enum_window.to_dict(total_key="totalEnumValues"),
                },
            }
        )
    except Exception as e:
        logger.error(f"Type details for {type_name} failed: {e}")
        return error_response("Error fetching type details", e)


async def fullSchemaAPI(
    client: GraphQLClient,
    scope: Optional[AccountScope],
    types_page_size: int = 100,
    types_page: int = 1,
    include_root_type_details: bool = True,
    max_type_details_to_fetch: int = 3,
) -> str:
    """
    Return a page of the type list plus full details of the root types.

    Root details cover the query type then the mutation type, capped at
    ``max_type_details_to_fetch``. A root type that fails to load is left out.
    """
    if scope is None:
        return NO_ACTIVE_ACCOUNT_MESSAGE

    try:
        check_range("typesPageSize", types_page_size, 10, 500)
        check_range("typesPage", types_page, 1)
        check_range("maxTypeDetailsToFetch", max_type_details_to_fetch, 0, 10)

        overview = await fetch_schema_overview(client, scope)
        window = paginate(overview.types, types_page, types_page_size)

        type_details: Dict[str, Any] = {}
        if include_root_type_details:
            root_types = [n for n in (overview.query_type_name, overview.mutation_type_name) if n]
            for type_name in root_types[:max_type_details_to_fetch]:
                try:
                    details = await fetch_type_details(client, scope, type_name)
                except Exception as e:
                    logger.error(f"Error fetching details for type {type_name}: {e}")
                    continue
                if details is not None:
                    type_details[type_name] = details.to_dict()

        return success_response(
            {
                "data": {
                    "__schema": {
                        **overview.root_types_dict(),
                        "types": [t.to_dict() for t in window.items],
                    }
                },
                "typeDetails": type_details,
                "pagination": {"types": window.to_dict(total_key="totalTypes")},
            }
        )
    except Exception as e:
        logger.error(f"Full schema fetch failed: {e}")
        return error_response("Error fetching GraphQL schema", e)
