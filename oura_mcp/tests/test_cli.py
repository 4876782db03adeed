"""Tests for the command line entry point and startup configuration."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from oura_mcp.cli import cli
from oura_mcp.config import Settings, require_token
from oura_mcp.errors import ConfigurationError
from oura_mcp.schemas import ToolResult


def _settings(token: str = "") -> Settings:
    return Settings(_env_file=None, oura_token=token)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_logging_setup():
    """Keep structlog bound to the real stderr, not the runner's capture stream."""
    with patch("oura_mcp.cli.configure_logging"):
        yield


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def test_require_token_returns_token():
    assert require_token(_settings("abc")) == "abc"


@pytest.mark.parametrize("token", ["", "   "])
def test_require_token_missing(token):
    with pytest.raises(ConfigurationError, match="OURA_TOKEN"):
        require_token(_settings(token))


def test_token_read_from_environment(monkeypatch):
    monkeypatch.setenv("OURA_TOKEN", "from-env")
    assert Settings(_env_file=None).oura_token == "from-env"


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


def test_serve_without_token_exits_before_serving(runner):
    with patch("oura_mcp.cli.get_settings", return_value=_settings()), \
            patch("oura_mcp.cli.run_stdio") as mock_run, \
            patch("oura_mcp.cli.create_server") as mock_create:
        result = runner.invoke(cli, ["serve"])

    assert result.exit_code == 1
    assert "OURA_TOKEN" in result.output
    mock_create.assert_not_called()
    mock_run.assert_not_called()


def test_default_command_is_serve(runner):
    with patch("oura_mcp.cli.get_settings", return_value=_settings()), \
            patch("oura_mcp.cli.run_stdio") as mock_run:
        result = runner.invoke(cli, [])

    assert result.exit_code == 1
    mock_run.assert_not_called()


def test_serve_stdio_with_token(runner):
    with patch("oura_mcp.cli.get_settings", return_value=_settings("abc")), \
            patch("oura_mcp.cli.run_stdio", new_callable=AsyncMock) as mock_run, \
            patch("oura_mcp.cli.create_server") as mock_create:
        result = runner.invoke(cli, ["serve"])

    assert result.exit_code == 0, result.output
    tools = mock_create.call_args.args[0]
    assert tools.client.base_url.endswith("/v2/usercollection")
    mock_run.assert_awaited_once_with(mock_create.return_value)


def test_serve_http_uses_uvicorn(runner):
    with patch("oura_mcp.cli.get_settings", return_value=_settings("abc")), \
            patch("oura_mcp.cli.OuraTools") as mock_tools, \
            patch("uvicorn.run") as mock_uvicorn:
        result = runner.invoke(cli, ["serve", "--transport", "http", "--port", "9001"])

    assert result.exit_code == 0, result.output
    args, kwargs = mock_uvicorn.call_args
    assert args[0] == "oura_mcp.main:app"
    assert kwargs["port"] == 9001
    mock_tools.assert_not_called()


def test_serve_http_without_token_exits_before_binding(runner):
    with patch("oura_mcp.cli.get_settings", return_value=_settings()), \
            patch("uvicorn.run") as mock_uvicorn:
        result = runner.invoke(cli, ["serve", "--transport", "http"])

    assert result.exit_code == 1
    assert "OURA_TOKEN" in result.output
    mock_uvicorn.assert_not_called()


# ---------------------------------------------------------------------------
# fetch
# ---------------------------------------------------------------------------


def test_fetch_prints_result(runner):
    ok = ToolResult.success({"data": []})

    with patch("oura_mcp.cli.get_settings", return_value=_settings("abc")), \
            patch("oura_mcp.tools.OuraTools.call_tool", new_callable=AsyncMock, return_value=ok) as mock_call:
        result = runner.invoke(
            cli, ["fetch", "sleep", "--start-date", "2024-03-01", "--end-date", "2024-03-02"]
        )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"data": []}
    name, arguments = mock_call.call_args.args
    assert name == "oura-fetch"
    assert arguments["endpoint"] == "sleep"
    assert arguments["startDate"] == "2024-03-01"
    assert arguments["sleepPeriod"] is False


def test_fetch_error_result_exits_nonzero(runner):
    failed = ToolResult.failure("API request failed with status 401: unauthorized")

    with patch("oura_mcp.cli.get_settings", return_value=_settings("abc")), \
            patch("oura_mcp.tools.OuraTools.call_tool", new_callable=AsyncMock, return_value=failed):
        result = runner.invoke(cli, ["fetch", "readiness"])

    assert result.exit_code == 1
    assert "status 401" in result.output


def test_fetch_rejects_unknown_endpoint(runner):
    result = runner.invoke(cli, ["fetch", "foo"])
    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# prompts
# ---------------------------------------------------------------------------


def test_prompts_list(runner):
    result = runner.invoke(cli, ["prompts"])

    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 12
    assert lines[0].startswith("get-readiness")


def test_prompts_show_one(runner):
    result = runner.invoke(cli, ["prompts", "verify-calculations"])

    assert result.exit_code == 0
    assert result.output.startswith("Verify my [METRIC_TYPE] calculations")


def test_prompts_unknown(runner):
    result = runner.invoke(cli, ["prompts", "nope"])

    assert result.exit_code == 1
    assert "Prompt not found: nope" in result.output
