"""Top-level installer configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import SETTINGS_FILE_NAME
from ...utils.get_home_dir import get_home_dir
from ..host.HostIdentity import HostIdentity
from .LogConfig import LogConfig
from .RuntimeConfig import RuntimeConfig


class InstallerConfig(BaseModel):
    """Top-level configuration for the installer."""

    model_config = ConfigDict(extra="forbid")

    runtimes: RuntimeConfig = Field(default_factory=RuntimeConfig)
    default_host: HostIdentity = HostIdentity.CLAUDE
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the settings file based on MCPINSTALL_HOME or ~/.mcpinstall."""
        return get_home_dir(SETTINGS_FILE_NAME)

    @classmethod
    def load(cls) -> "InstallerConfig":
        """Load and validate config from file.

        A missing settings file is not an error: every section has defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
