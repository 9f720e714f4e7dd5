"""Write a host config file atomically."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from ..pipeline.FailureKind import FailureKind
from .HostConfigError import HostConfigError


def write_host_config(config_file: Path, data: dict[str, Any]) -> None:
    """Serialize with two-space indentation to a temp file, then rename over the original.

    Raises:
        HostConfigError: If the file cannot be written
    """
    temp_path = config_file.with_suffix(config_file.suffix + ".tmp")
    try:
        with temp_path.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
            fh.write("\n")
        temp_path.replace(config_file)
    except OSError as e:
        with suppress(OSError):
            if temp_path.exists():
                temp_path.unlink()
        raise HostConfigError(
            FailureKind.CONFIG_WRITE_ERROR,
            f"Could not write configuration file {config_file}: {e}",
        ) from e
