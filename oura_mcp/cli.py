"""Command line entry point for the Oura MCP server."""

from __future__ import annotations

import asyncio
import sys

import click
import structlog

from oura_mcp.client import OuraClient
from oura_mcp.config import Settings, get_settings, require_token
from oura_mcp.errors import ConfigurationError
from oura_mcp.log import configure_logging
from oura_mcp.manifest import ENDPOINTS, TOOL_NAME
from oura_mcp.prompts import get_prompt, list_prompts
from oura_mcp.server import create_server, run_stdio
from oura_mcp.tools import OuraTools

logger = structlog.get_logger()


def run_async(coro):
    """Run an async function in a new event loop."""
    return asyncio.run(coro)


def _token_or_exit(settings: Settings) -> str:
    """Return the API token, exiting with status 1 when none is configured."""
    try:
        return require_token(settings)
    except ConfigurationError as e:
        logger.error("configuration_error", error=str(e))
        click.echo(str(e), err=True)
        sys.exit(1)


def _build_tools(settings: Settings) -> OuraTools:
    token = _token_or_exit(settings)
    client = OuraClient(
        token,
        base_url=settings.oura_api_base,
        timeout=settings.oura_timeout_seconds,
    )
    return OuraTools(client)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context):
    """Oura Ring MCP server. Serves over stdio when no command is given."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@cli.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "http"]),
    default="stdio",
    show_default=True,
)
@click.option("--host", default=None, help="Bind host for the http transport.")
@click.option("--port", type=int, default=None, help="Bind port for the http transport.")
def serve(transport: str = "stdio", host: str | None = None, port: int | None = None):
    """Start serving tool and prompt requests."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if transport == "http":
        # The app builds its own router on startup; fail here before binding
        _token_or_exit(settings)
        import uvicorn

        logger.info("oura_server_starting", transport="http")
        uvicorn.run(
            "oura_mcp.main:app",
            host=host or settings.http_host,
            port=port or settings.http_port,
            log_level=settings.log_level.lower(),
        )
        return

    tools = _build_tools(settings)
    run_async(run_stdio(create_server(tools)))


@cli.command()
@click.argument("endpoint", type=click.Choice(ENDPOINTS))
@click.option("--start-date", help="YYYY-MM-DD")
@click.option("--end-date", help="YYYY-MM-DD")
@click.option("--start-datetime", help="ISO-8601 datetime with offset (heartrate)")
@click.option("--end-datetime", help="ISO-8601 datetime with offset (heartrate)")
@click.option("--sleep-period", is_flag=True, help="Pair heart rate with sleep sessions.")
@click.option("--tag-name", help="Keyword filter for tags.")
def fetch(endpoint, start_date, end_date, start_datetime, end_datetime, sleep_period, tag_name):
    """Run one oura-fetch call and print the result JSON."""
    settings = get_settings()
    configure_logging(settings.log_level)
    tools = _build_tools(settings)

    arguments = {
        "endpoint": endpoint,
        "startDate": start_date,
        "endDate": end_date,
        "startDateTime": start_datetime,
        "endDateTime": end_datetime,
        "sleepPeriod": sleep_period,
        "tagName": tag_name,
    }
    result = run_async(tools.call_tool(TOOL_NAME, arguments))
    for item in result.content:
        click.echo(item.text)
    if result.is_error:
        sys.exit(1)


@cli.command()
@click.argument("prompt_id", required=False)
def prompts(prompt_id: str | None):
    """List prompt templates, or print one by id."""
    if prompt_id is None:
        for prompt in list_prompts():
            click.echo(f"{prompt.id:<28} {prompt.description}")
        return

    try:
        prompt = get_prompt(prompt_id)
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(prompt.text)
