"""Derive a host's configuration directory and file (pure path computation)."""

import os
import platform
from pathlib import Path

from ...constants import CLAUDE_CONFIG_FILE_NAME, GENERIC_CONFIG_FILE_NAME
from .HostIdentity import HostIdentity
from .HostLocation import HostLocation


def get_host_location(
    host: HostIdentity,
    system: str | None = None,
    home: Path | None = None,
    appdata: Path | None = None,
) -> HostLocation:
    """Compute where a host keeps its configuration.

    Claude Desktop lives in the platform application-support directory; every
    other host uses a dot-directory named after itself. On Windows both resolve
    under the roaming application-data root instead of the home directory.

    Args:
        host: Host identity
        system: Platform name as returned by ``platform.system()`` (default: current)
        home: Home directory root (default: ``Path.home()``)
        appdata: Roaming application-data root on Windows (default: ``%APPDATA%``)

    Returns:
        HostLocation with directory and config file paths
    """
    system = (system or platform.system()).lower()
    home = home if home is not None else Path.home()

    if system == "windows":
        if appdata is None:
            env_appdata = os.environ.get("APPDATA")
            appdata = Path(env_appdata) if env_appdata else home / "AppData" / "Roaming"
        base = appdata
    else:
        base = home

    if host is HostIdentity.CLAUDE:
        if system == "windows":
            directory = base / "Claude"
        elif system == "darwin":
            directory = base / "Library" / "Application Support" / "Claude"
        else:
            directory = base / ".config" / "Claude"
        file_name = CLAUDE_CONFIG_FILE_NAME
    else:
        directory = base / f".{host.value}"
        file_name = GENERIC_CONFIG_FILE_NAME

    return HostLocation(host=host, directory=directory, config_file=directory / file_name)
