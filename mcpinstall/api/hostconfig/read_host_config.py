"""Load a host config file without ever creating it."""

import json
from pathlib import Path
from typing import Any

from ...constants import MCP_SERVERS_KEY
from ..pipeline.FailureKind import FailureKind
from .HostConfigError import HostConfigError


def read_host_config(config_file: Path) -> dict[str, Any]:
    """Parse the host's config, keeping every top-level key in file order.

    Raises:
        HostConfigError: If the file is absent, is not valid JSON, or its
            top level / ``mcpServers`` value is not an object
    """
    if not config_file.is_file():
        raise HostConfigError(
            FailureKind.CONFIG_FILE_NOT_FOUND,
            f"Configuration file not found at {config_file}. "
            "Start the host application once so it creates its configuration, then try again.",
        )

    try:
        with config_file.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except UnicodeDecodeError as e:
        raise HostConfigError(
            FailureKind.CONFIG_PARSE_ERROR,
            f"Configuration file {config_file} is not valid UTF-8: {e}. The file was left unchanged.",
        ) from e
    except json.JSONDecodeError as e:
        raise HostConfigError(
            FailureKind.CONFIG_PARSE_ERROR,
            f"Configuration file {config_file} is not valid JSON: {e}. The file was left unchanged.",
        ) from e
    except OSError as e:
        raise HostConfigError(
            FailureKind.CONFIG_PARSE_ERROR,
            f"Configuration file {config_file} could not be read: {e}",
        ) from e

    if not isinstance(data, dict):
        raise HostConfigError(
            FailureKind.CONFIG_PARSE_ERROR,
            f"Configuration file {config_file} must contain a JSON object, found {type(data).__name__}",
        )

    servers = data.get(MCP_SERVERS_KEY)
    if servers is not None and not isinstance(servers, dict):
        raise HostConfigError(
            FailureKind.CONFIG_PARSE_ERROR,
            f"'{MCP_SERVERS_KEY}' in {config_file} must be a JSON object, found {type(servers).__name__}",
        )

    return data
