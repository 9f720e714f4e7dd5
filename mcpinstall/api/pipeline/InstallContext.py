"""Mutable state threaded through the steps of one install request."""

from dataclasses import dataclass, field
from pathlib import Path

from ..config.InstallerConfig import InstallerConfig
from ..host.HostIdentity import HostIdentity
from ..host.HostLocation import HostLocation
from ..server.ServerEntry import ServerEntry


@dataclass
class InstallContext:
    """Inputs plus everything earlier steps resolved for later ones.

    Lives for a single request and is never shared.
    """

    config: InstallerConfig
    host: HostIdentity | str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] | None = None
    location: HostLocation | None = None
    server_name: str | None = None
    entry: ServerEntry | None = None
    package_dir: Path | None = None
    entry_points: dict[str, Path] = field(default_factory=dict)
    notes: list[str] = field(default_factory=list)
    message: str = ""
