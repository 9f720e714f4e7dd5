"""API module for mcpinstall.

Functions defined here are the single source of truth for both CLI commands and MCP tools.
"""

__all__ = []
