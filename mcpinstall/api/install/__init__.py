"""Install, list and remove MCP servers in host configurations."""
