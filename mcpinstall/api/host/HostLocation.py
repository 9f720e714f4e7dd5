"""Resolved configuration location for one host."""

from dataclasses import dataclass
from pathlib import Path

from .HostIdentity import HostIdentity


@dataclass(frozen=True)
class HostLocation:
    """Where a host keeps its MCP server configuration."""

    host: HostIdentity
    directory: Path
    config_file: Path

    def is_installed(self) -> bool:
        """A host is installed when its config directory exists as a directory."""
        return self.directory.is_dir()
