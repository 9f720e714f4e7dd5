"""Read and update a host's MCP server configuration file."""

from .HostConfigError import HostConfigError
from .merge_server_entry import merge_server_entry
from .read_host_config import read_host_config
from .remove_server_entry import remove_server_entry
from .write_host_config import write_host_config

__all__ = [
    "HostConfigError",
    "merge_server_entry",
    "read_host_config",
    "remove_server_entry",
    "write_host_config",
]
