"""MCP (Model Context Protocol) server exposing the installer as tools."""

from .call_tool import call_tool
from .server import MCPServer
from .tools import TOOLS

__all__ = ["MCPServer", "TOOLS", "call_tool"]
