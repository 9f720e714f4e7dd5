"""mcpinstall - register MCP servers with desktop and editor hosts."""
