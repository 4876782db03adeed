"""MCP server wiring — exposes the Oura tool and prompt catalog over stdio."""

from __future__ import annotations

import mcp.server.stdio
import structlog
from mcp import types
from mcp.server.lowlevel import Server

from oura_mcp import SERVER_NAME, __version__
from oura_mcp.manifest import MANIFEST
from oura_mcp.prompts import PLACEHOLDER_DESCRIPTIONS, get_prompt, list_prompts
from oura_mcp.tools import OuraTools

logger = structlog.get_logger()


def _prompt_arguments(arguments: list[str]) -> list[types.PromptArgument]:
    return [
        types.PromptArgument(
            name=name,
            description=PLACEHOLDER_DESCRIPTIONS[name],
            required=False,
        )
        for name in arguments
    ]


def create_server(tools: OuraTools) -> Server:
    """Build an MCP server whose handlers delegate to ``tools`` and the prompt catalog."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema(),
            )
            for tool in MANIFEST.tools
        ]

    # Arguments are validated by the router so its error messages reach the caller.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
        result = await tools.call_tool(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=item.text) for item in result.content],
            isError=result.is_error,
        )

    @server.list_prompts()
    async def handle_list_prompts() -> list[types.Prompt]:
        return [
            types.Prompt(
                name=prompt.id,
                title=prompt.name,
                description=prompt.description,
                arguments=_prompt_arguments(prompt.arguments()),
            )
            for prompt in list_prompts()
        ]

    @server.get_prompt()
    async def handle_get_prompt(
        name: str, arguments: dict[str, str] | None
    ) -> types.GetPromptResult:
        try:
            prompt = get_prompt(name)
        except ValueError:
            logger.warning("prompt_not_found", prompt_id=name)
            raise
        return types.GetPromptResult(
            description=prompt.description,
            messages=[
                types.PromptMessage(
                    role="user",
                    content=types.TextContent(type="text", text=prompt.render(arguments)),
                )
            ],
        )

    return server


async def run_stdio(server: Server) -> None:
    """Serve ``server`` over stdin/stdout until the client disconnects."""
    logger.info("oura_server_starting", transport="stdio", version=__version__)
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
