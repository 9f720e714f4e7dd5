"""Entry point for the mcpinstall MCP stdio server."""

from mcpinstall.api.config.InstallerConfig import InstallerConfig
from mcpinstall.utils.logger import configure_logging, get_logger

from .server import MCPServer


def main() -> None:
    """Configure logging from the installer config and serve over stdio."""
    try:
        config = InstallerConfig.load()
        config_error = None
    except ValueError as e:
        config = InstallerConfig()
        config_error = e

    configure_logging(level=config.log.level, max_bytes=config.log.max_bytes, backup_count=config.log.backup_count)
    if config_error is not None:
        # Tool calls report this to the caller; keep serving.
        get_logger("mcp").warning("Ignoring invalid installer config for logging: %s", config_error)

    MCPServer().run()


if __name__ == "__main__":
    main()
