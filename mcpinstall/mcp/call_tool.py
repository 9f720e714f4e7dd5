"""Convenience entry point for invoking MCP tools directly."""

from typing import Any

from .server import MCPServer


def call_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Call a single MCP tool by name."""
    server = MCPServer()
    if tool_name not in server.tools:
        return {"content": [{"type": "text", "text": f"Tool not found: {tool_name}"}], "isError": True}
    return server.call_tool(tool_name, arguments)
