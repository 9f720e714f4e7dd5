"""Remove one server entry from a host config file."""

from pathlib import Path

from ...constants import MCP_SERVERS_KEY
from ...utils.logger import get_logger
from ..pipeline.FailureKind import FailureKind
from ..pipeline.StepFailure import StepFailure
from .HostConfigError import HostConfigError
from .read_host_config import read_host_config
from .write_host_config import write_host_config

logger = get_logger("hostconfig")


def remove_server_entry(config_file: Path, server_name: str) -> StepFailure | None:
    """Delete ``mcpServers[server_name]``, preserving all other keys."""
    try:
        data = read_host_config(config_file)
        servers = data.get(MCP_SERVERS_KEY) or {}
        if server_name not in servers:
            return StepFailure(
                FailureKind.SERVER_NOT_FOUND,
                f"Server '{server_name}' is not registered in {config_file}",
            )
        del servers[server_name]
        write_host_config(config_file, data)
    except HostConfigError as e:
        return e.to_failure()

    logger.info("Removed server '%s' from %s", server_name, config_file)
    return None
