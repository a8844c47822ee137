"""Tests for the upstream GraphQL transport client."""

import json
import logging

import httpx
import pytest

from graphql_explorer.graphql_client import (AccountScope, GraphQLClient,
                                             UpstreamTransportError,
                                             graphql_errors)

ENDPOINT = "https://graphql.example.com/graphql"
SCOPE = AccountScope(account_id="acc-1", api_token="secret-token")


def _client(handler) -> GraphQLClient:
    return GraphQLClient(endpoint=ENDPOINT, transport=httpx.MockTransport(handler))


class TestGraphQLClient:
    """Test request shape and failure handling."""

    @pytest.mark.asyncio
    async def test_posts_query_variables_and_bearer(self):
        """Test the request body and headers."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {"ok": True}})

        body = await _client(handler).execute("{ ok }", SCOPE, variables={"a": 1})

        assert body == {"data": {"ok": True}}
        assert seen["method"] == "POST"
        assert seen["url"] == ENDPOINT
        assert seen["auth"] == "Bearer secret-token"
        assert seen["body"] == {"query": "{ ok }", "variables": {"a": 1}}

    @pytest.mark.asyncio
    async def test_variables_omitted_when_none(self):
        """Test no variables key is sent when none are given."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {}})

        await _client(handler).execute("{ ok }", SCOPE)

        assert seen["body"] == {"query": "{ ok }"}

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        """Test HTTP errors become UpstreamTransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"errors": [{"message": "forbidden"}]})

        with pytest.raises(UpstreamTransportError) as exc_info:
            await _client(handler).execute("{ ok }", SCOPE)

        assert exc_info.value.status_code == 403
        assert "403" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_network_failure_raises(self):
        """Test connection errors become UpstreamTransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamTransportError):
            await _client(handler).execute("{ ok }", SCOPE)

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        """Test a non-JSON body becomes UpstreamTransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        with pytest.raises(UpstreamTransportError):
            await _client(handler).execute("{ ok }", SCOPE)

    @pytest.mark.asyncio
    async def test_graphql_errors_are_not_fatal(self, caplog):
        """Test partial data is returned and the errors are logged."""
        payload = {"data": {"viewer": None}, "errors": [{"message": "quota exceeded"}]}

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload)

        with caplog.at_level(logging.WARNING):
            body = await _client(handler).execute("{ viewer { id } }", SCOPE)

        assert body == payload
        assert "quota exceeded" in caplog.text


class TestGraphQLErrors:
    """Test error message extraction."""

    def test_extracts_messages(self):
        body = {"errors": [{"message": "a"}, {"message": "b"}]}
        assert graphql_errors(body) == ["a", "b"]

    def test_no_errors(self):
        assert graphql_errors({"data": {}}) == []
        assert graphql_errors({"errors": None}) == []
        assert graphql_errors(None) == []
