"""Oura module — FastAPI service (HTTP alternative to the stdio MCP transport)."""

from __future__ import annotations

import structlog
from fastapi import Depends, FastAPI, HTTPException

from oura_mcp import __version__
from oura_mcp.auth import require_service_auth
from oura_mcp.client import OuraClient
from oura_mcp.config import get_settings, require_token
from oura_mcp.manifest import MANIFEST
from oura_mcp.prompts import get_prompt, list_prompts
from oura_mcp.schemas import HealthResponse, ModuleManifest, ToolCall, ToolResult
from oura_mcp.tools import OuraTools

logger = structlog.get_logger()
app = FastAPI(title="Oura Module", version=__version__)

tools: OuraTools | None = None


@app.on_event("startup")
async def startup():
    global tools
    settings = get_settings()
    client = OuraClient(
        require_token(settings),
        base_url=settings.oura_api_base,
        timeout=settings.oura_timeout_seconds,
    )
    tools = OuraTools(client)
    logger.info("oura_module_ready")


@app.get("/manifest", response_model=ModuleManifest)
async def manifest(_=Depends(require_service_auth)):
    """Return the module manifest."""
    return MANIFEST


@app.post("/execute", response_model=ToolResult)
async def execute(call: ToolCall, _=Depends(require_service_auth)):
    """Execute a tool call."""
    if tools is None:
        return ToolResult.failure("Module not ready")
    return await tools.call_tool(call.tool_name, call.arguments)


@app.get("/prompts")
async def prompts(_=Depends(require_service_auth)):
    return {"prompts": [prompt.summary() for prompt in list_prompts()]}


@app.get("/prompts/{prompt_id}")
async def prompt(prompt_id: str, _=Depends(require_service_auth)):
    try:
        template = get_prompt(prompt_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"prompt": {**template.summary(), "text": template.text}}


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")
