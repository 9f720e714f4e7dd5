import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME
from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified installer logging.

    Logs go to a rotating file only. stdout carries the MCP stdio transport
    and must never receive log lines.

    Args:
        home: Installer home directory. If None, derived from environment.
        level: Logging level name.
        max_bytes: Rotate after this many bytes.
        backup_count: Number of rotated files to keep.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILE_NAME

    root_logger = logging.getLogger("mcpinstall")
    root_logger.setLevel(level.upper())
    root_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Handlers are attached by configure_logging() at the CLI and MCP entry points.
    """
    return logging.getLogger(f"mcpinstall.{name}")
