"""Tool, manifest and result schemas."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolParameter(BaseModel):
    """Parameter definition for a tool."""

    name: str
    type: str  # string, integer, boolean, number, array, object
    description: str
    required: bool = True
    enum: list[str] | None = None


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by the server."""

    name: str  # e.g. "oura-fetch"
    description: str
    parameters: list[ToolParameter]

    def input_schema(self) -> dict[str, Any]:
        """Render the parameters as a JSON schema object."""
        properties: dict[str, Any] = {}
        for param in self.parameters:
            prop: dict[str, Any] = {"type": param.type, "description": param.description}
            if param.enum is not None:
                prop["enum"] = list(param.enum)
            properties[param.name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [p.name for p in self.parameters if p.required],
        }


class ModuleManifest(BaseModel):
    """Manifest describing the server and its tools."""

    module_name: str
    description: str
    tools: list[ToolDefinition]


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict = Field(default_factory=dict)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result from a tool execution, in MCP ``CallToolResult`` shape."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def success(cls, payload: Any) -> ToolResult:
        return cls(content=[TextContent(text=json.dumps(payload))], is_error=False)

    @classmethod
    def failure(cls, message: str) -> ToolResult:
        return cls(content=[TextContent(text=json.dumps({"error": message}))], is_error=True)


class HealthResponse(BaseModel):
    """Standard health check response."""

    status: str = "ok"
