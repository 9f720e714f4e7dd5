"""Check whether a package name resolves in the public npm registry."""

from ..config.RuntimeConfig import RuntimeConfig
from .probe import probe


def package_exists(package_name: str, runtimes: RuntimeConfig) -> bool:
    return probe(runtimes.npm, ["view", package_name, "version"], timeout=runtimes.command_timeout)
