"""Progressive schema introspection: flat overview first, single types on demand."""

import logging
from typing import Optional

from ..graphql_client import (AccountScope, GraphQLClient,
                              UpstreamGraphQLError, graphql_errors)
from .data_classes import SchemaOverview, TypeDescriptor

logger = logging.getLogger(__name__)

SCHEMA_OVERVIEW_QUERY = """
query SchemaOverview {
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types {
      name
      kind
      description
    }
  }
}
"""

# Field types unwrap three levels: NON_NULL(LIST(NON_NULL(T)))
TYPE_DETAILS_QUERY = """
query TypeDetails($name: String!) {
  __type(name: $name) {
    name
    kind
    description
    fields(includeDeprecated: false) {
      name
      description
      args {
        name
        description
        type {
          kind
          name
          ofType {
            kind
            name
          }
        }
      }
      type {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
          }
        }
      }
    }
    inputFields {
      name
      description
      type {
        kind
        name
        ofType {
          kind
          name
        }
      }
    }
    interfaces {
      name
    }
    enumValues(includeDeprecated: false) {
      name
      description
    }
    possibleTypes {
      name
    }
  }
}
"""


async def fetch_schema_overview(client: GraphQLClient, scope: AccountScope) -> SchemaOverview:
    """
    Fetch root operation type names and the flat list of named types.

    Args:
        client: Transport client
        scope: Active account scope

    Returns:
        SchemaOverview with types in schema order

    Raises:
        UpstreamTransportError: If the HTTP call fails
        UpstreamGraphQLError: If the response carries no ``__schema`` data
    """
    body = await client.execute(SCHEMA_OVERVIEW_QUERY, scope)
    schema = (body.get("data") or {}).get("__schema")
    if not schema:
        raise UpstreamGraphQLError(graphql_errors(body))

    overview = SchemaOverview.from_dict(schema)
    logger.info(f"Fetched schema overview with {len(overview.types)} types")
    return overview


async def fetch_type_details(
    client: GraphQLClient, scope: AccountScope, type_name: str
) -> Optional[TypeDescriptor]:
    """
    Fetch the full shape of one named type.

    Returns:
        TypeDescriptor, or None when the upstream does not know the type
    """
    body = await client.execute(TYPE_DETAILS_QUERY, scope, variables={"name": type_name})
    raw_type = (body.get("data") or {}).get("__type")
    if raw_type is None:
        logger.info(f"Type not found: {type_name}")
        return None
    return TypeDescriptor.from_dict(raw_type)
