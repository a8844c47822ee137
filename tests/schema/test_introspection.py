"""Tests for the schema overview and type detail fetchers."""

import pytest

from graphql_explorer.graphql_client import (UpstreamGraphQLError,
                                             UpstreamTransportError)
from graphql_explorer.schema.data_classes import TypeKind
from graphql_explorer.schema.introspection import (TYPE_DETAILS_QUERY,
                                                   fetch_schema_overview,
                                                   fetch_type_details)
from tests.graphql_fixtures import (SCOPE, FakeGraphQLClient, field,
                                    object_type, overview_body, summary)


class TestFetchSchemaOverview:
    """Test the overview fetcher."""

    @pytest.mark.asyncio
    async def test_returns_overview(self):
        """Test types and roots are parsed in schema order."""
        client = FakeGraphQLClient(overview=overview_body([summary("Query"), summary("Zone")]))

        overview = await fetch_schema_overview(client, SCOPE)

        assert overview.query_type_name == "Query"
        assert [t.name for t in overview.types] == ["Query", "Zone"]
        assert client.calls[0]["scope"] == SCOPE

    @pytest.mark.asyncio
    async def test_partial_data_with_errors(self):
        """Test GraphQL errors alongside data do not fail the fetch."""
        body = overview_body([summary("Query")])
        body["errors"] = [{"message": "Mutations are not supported"}]
        client = FakeGraphQLClient(overview=body)

        overview = await fetch_schema_overview(client, SCOPE)

        assert [t.name for t in overview.types] == ["Query"]

    @pytest.mark.asyncio
    async def test_no_schema_data(self):
        """Test errors without data raise UpstreamGraphQLError."""
        client = FakeGraphQLClient(overview={"data": None, "errors": [{"message": "not authorized"}]})

        with pytest.raises(UpstreamGraphQLError, match="not authorized"):
            await fetch_schema_overview(client, SCOPE)

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self):
        """Test transport errors are not swallowed."""
        client = FakeGraphQLClient(overview=UpstreamTransportError("502 Bad Gateway", status_code=502))

        with pytest.raises(UpstreamTransportError):
            await fetch_schema_overview(client, SCOPE)


class TestFetchTypeDetails:
    """Test the type detail fetcher."""

    @pytest.mark.asyncio
    async def test_returns_descriptor(self):
        """Test the type name is sent as a variable and parsed."""
        client = FakeGraphQLClient(type_details={"Zone": object_type("Zone", [field("id")])})

        descriptor = await fetch_type_details(client, SCOPE, "Zone")

        assert descriptor.kind == TypeKind.OBJECT
        assert descriptor.fields[0].name == "id"
        assert client.calls[0]["variables"] == {"name": "Zone"}

    @pytest.mark.asyncio
    async def test_unknown_type_is_none(self):
        """Test a null __type means not found rather than an error."""
        client = FakeGraphQLClient()

        assert await fetch_type_details(client, SCOPE, "Missing") is None

    def test_query_shape(self):
        """Test the type name is a variable and deprecated members are excluded."""
        assert "__type(name: $name)" in TYPE_DETAILS_QUERY
        assert TYPE_DETAILS_QUERY.count("includeDeprecated: false") == 2
