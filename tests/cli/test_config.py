"""Tests for configuration loading and CLI argument parsing."""

import os
from unittest.mock import patch

from graphql_explorer.cli.config import Config
from graphql_explorer.cli.main import build_parser
from graphql_explorer.graphql_client import DEFAULT_ENDPOINT, AccountScope
from graphql_explorer.mcp_server.shared_resources import SharedResources


class TestConfig:
    """Test environment-driven configuration."""

    def test_defaults(self, tmp_path):
        """Test defaults when nothing is set."""
        env_file = tmp_path / ".env"
        env_file.write_text("")

        with patch.dict(os.environ, {}, clear=True):
            config = Config(env_file=str(env_file))

        assert config.graphql_endpoint == DEFAULT_ENDPOINT
        assert config.graphql_timeout_seconds == 30.0
        assert config.response_size_limit == 900000
        assert config.search_max_details_to_fetch == 10
        assert config.mcp_server_name == "GraphQL Explorer"
        assert config.account_scope() is None

    def test_env_file(self, tmp_path):
        """Test values are read from an explicit .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "GRAPHQL_ENDPOINT=https://example.test/graphql\n"
            "GRAPHQL_ACCOUNT_ID=acc-1\n"
            "GRAPHQL_API_TOKEN=secret\n"
            "RESPONSE_SIZE_LIMIT=5000\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = Config(env_file=str(env_file))

        assert config.graphql_endpoint == "https://example.test/graphql"
        assert config.response_size_limit == 5000
        assert config.account_scope() == AccountScope(account_id="acc-1", api_token="secret")

    def test_environment_wins_over_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GRAPHQL_TIMEOUT_SECONDS=5\n")

        with patch.dict(os.environ, {"GRAPHQL_TIMEOUT_SECONDS": "12.5"}, clear=True):
            config = Config(env_file=str(env_file))

        assert config.graphql_timeout_seconds == 12.5

    def test_account_requires_token(self, tmp_path):
        """Test an account id alone does not make an active scope."""
        env_file = tmp_path / ".env"
        env_file.write_text("")

        with patch.dict(os.environ, {"GRAPHQL_ACCOUNT_ID": "acc-1"}, clear=True):
            config = Config(env_file=str(env_file))

        assert config.account_scope() is None


class TestSharedResources:
    """Test the per-process resource holder."""

    def test_not_ready_before_load(self):
        resources = SharedResources()

        assert not resources.is_ready()
        assert resources.active_scope() is None
        assert resources.response_size_limit() == 900000

    def test_load_from_config(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GRAPHQL_ACCOUNT_ID=acc-1\nGRAPHQL_API_TOKEN=t\nRESPONSE_SIZE_LIMIT=42\n")
        with patch.dict(os.environ, {}, clear=True):
            config = Config(env_file=str(env_file))

        resources = SharedResources()
        resources.load_from_config(config)

        assert resources.is_ready()
        assert resources.client.endpoint == DEFAULT_ENDPOINT
        assert resources.active_scope().account_id == "acc-1"
        assert resources.response_size_limit() == 42


class TestParser:
    """Test CLI argument parsing."""

    def test_search_arguments(self):
        args = build_parser().parse_args(["search", "zone", "--max-details", "5", "--include-internal", "-v"])

        assert args.command == "search"
        assert args.keyword == "zone"
        assert args.max_details == 5
        assert args.include_internal is True
        assert args.verbose is True

    def test_query_arguments(self):
        args = build_parser().parse_args(
            ["query", "{ viewer { zones { zoneTag } } }", "--pagination-path", "data.viewer.zones", "--page-size", "10"]
        )

        assert args.pagination_path == "data.viewer.zones"
        assert args.page_size == 10
        assert args.page is None
