"""Tests for running tool functions from the CLI."""

import json
import os
from unittest.mock import patch

import pytest

from graphql_explorer.cli.commands._runner import run_tool
from graphql_explorer.cli.config import Config
from graphql_explorer.mcp_server.response_assembler import \
    NO_ACTIVE_ACCOUNT_MESSAGE
from graphql_explorer.pagination import OVERSIZED_RESULT_MESSAGE


@pytest.fixture
def config(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("GRAPHQL_ACCOUNT_ID=acc-1\nGRAPHQL_API_TOKEN=t\n")
    with patch.dict(os.environ, {}, clear=True):
        return Config(env_file=str(env_file))


def _returning(text):
    async def call(client, scope):
        return text

    return call


class TestRunTool:
    """Test output and exit status of run_tool."""

    def test_pretty_prints_json(self, config, capsys):
        run_tool(config, _returning(json.dumps({"data": {"ok": True}})))

        assert json.loads(capsys.readouterr().out) == {"data": {"ok": True}}

    def test_passes_scope(self, config):
        seen = {}

        async def call(client, scope):
            seen["scope"] = scope
            return "{}"

        run_tool(config, call)

        assert seen["scope"].account_id == "acc-1"

    def test_plain_text_advisory_printed(self, config, capsys):
        run_tool(config, _returning(OVERSIZED_RESULT_MESSAGE))

        assert capsys.readouterr().out.strip() == OVERSIZED_RESULT_MESSAGE

    def test_error_payload_exits(self, config):
        with pytest.raises(SystemExit) as exc_info:
            run_tool(config, _returning(json.dumps({"error": "Error executing GraphQL query: boom"})))

        assert exc_info.value.code == 1

    def test_no_account_exits(self, config):
        with pytest.raises(SystemExit):
            run_tool(config, _returning(NO_ACTIVE_ACCOUNT_MESSAGE))
