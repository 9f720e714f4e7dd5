"""Answer whether an external command is invokable."""

from collections.abc import Sequence

from ...utils.logger import get_logger
from .run_command import run_command

logger = get_logger("probe")


def probe(command: str, args: Sequence[str] = ("--version",), timeout: float | None = None) -> bool:
    """Attempt a trivial invocation; any failure collapses to False."""
    result = run_command(command, args, timeout=timeout)
    logger.info("Probe %s %s -> %s", command, " ".join(args), "ok" if result.ok else result.error_text)
    return result.ok
