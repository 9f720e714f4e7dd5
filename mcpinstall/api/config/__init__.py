"""Installer configuration models."""

from .InstallerConfig import InstallerConfig
from .LogConfig import LogConfig
from .RuntimeConfig import RuntimeConfig

__all__ = ["InstallerConfig", "LogConfig", "RuntimeConfig"]
