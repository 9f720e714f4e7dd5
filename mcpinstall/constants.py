"""Shared constants for installer state and host configuration files."""

MCPINSTALL_HOME_EXT = ".mcpinstall"  # user-level state/config directory suffix

MCPINSTALL_HOME_ENV = "MCPINSTALL_HOME"

LOG_FILE_NAME = "mcpinstall.log"

SETTINGS_FILE_NAME = "config.json"

# Host configuration file names
CLAUDE_CONFIG_FILE_NAME = "claude_desktop_config.json"
GENERIC_CONFIG_FILE_NAME = "mcp.json"

MCP_SERVERS_KEY = "mcpServers"
