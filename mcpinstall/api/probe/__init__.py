"""Capability checks against external runtimes and the package registry."""

from .CommandResult import CommandResult
from .package_exists import package_exists
from .probe import probe
from .run_command import run_command

__all__ = ["CommandResult", "package_exists", "probe", "run_command"]
