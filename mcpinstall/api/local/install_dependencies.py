"""Run ``npm install`` inside a package directory."""

from pathlib import Path

from ...utils.logger import get_logger
from ..config.RuntimeConfig import RuntimeConfig
from ..probe.CommandResult import CommandResult
from ..probe.run_command import run_command

logger = get_logger("local")


def install_dependencies(directory: Path, runtimes: RuntimeConfig) -> CommandResult:
    """Block until the install finishes; the caller inspects ``ok``."""
    logger.info("Running %s install in %s", runtimes.npm, directory)
    result = run_command(runtimes.npm, ["install"], cwd=directory, timeout=runtimes.command_timeout)
    if not result.ok:
        logger.warning("%s install failed in %s: %s", runtimes.npm, directory, result.error_text)
    return result
