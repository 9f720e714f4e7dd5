"""Insert or replace one server entry in a host config file."""

from pathlib import Path

from ...constants import MCP_SERVERS_KEY
from ...utils.logger import get_logger
from ..pipeline.StepFailure import StepFailure
from ..server.ServerEntry import ServerEntry
from .HostConfigError import HostConfigError
from .read_host_config import read_host_config
from .write_host_config import write_host_config

logger = get_logger("hostconfig")


def merge_server_entry(config_file: Path, server_name: str, entry: ServerEntry) -> StepFailure | None:
    """Set ``mcpServers[server_name]`` to ``entry``, leaving every other key untouched.

    An existing entry with the same name is replaced wholesale (last write wins).
    The file must already exist; it is never created here.

    Returns:
        StepFailure if the file is missing, unparseable or unwritable, else None
    """
    try:
        data = read_host_config(config_file)
        servers = data.setdefault(MCP_SERVERS_KEY, {})
        replaced = server_name in servers
        servers[server_name] = entry.to_json()
        write_host_config(config_file, data)
    except HostConfigError as e:
        return e.to_failure()

    logger.info(
        "%s server '%s' in %s (command=%s)",
        "Replaced" if replaced else "Added",
        server_name,
        config_file,
        entry.command,
    )
    return None
