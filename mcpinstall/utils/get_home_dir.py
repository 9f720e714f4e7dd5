"""Get the installer home directory path or a path under it."""

import os
from pathlib import Path

from ..constants import MCPINSTALL_HOME_ENV, MCPINSTALL_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get installer home directory path or path under it.

    Checks the MCPINSTALL_HOME environment variable first, defaults to
    ~/.mcpinstall if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.mcpinstall")
        >>> get_home_dir("config.json")
        Path("/Users/user/.mcpinstall/config.json")
    """
    home_env = os.environ.get(MCPINSTALL_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / MCPINSTALL_HOME_EXT

    return home / Path(*parts) if parts else home
