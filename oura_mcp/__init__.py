"""Oura Ring MCP server — tools and prompts for the Oura v2 API."""

__version__ = "1.0.0"

SERVER_NAME = "oura-mcp-server"
