"""Run an external command and capture its result without raising."""

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .CommandResult import CommandResult


def run_command(
    command: str,
    args: Sequence[str] = (),
    cwd: Path | None = None,
    timeout: float | None = None,
) -> CommandResult:
    """Run ``command`` with ``args`` and block until it exits.

    The command is resolved on PATH first so Windows ``.cmd`` shims are found.
    stdin is detached from the child because our own stdin may be the MCP
    transport.

    Returns:
        CommandResult; spawn errors and timeouts become non-zero results
    """
    resolved = shutil.which(command)
    if resolved is None:
        return CommandResult(returncode=127, stderr=f"{command}: command not found")

    try:
        completed = subprocess.run(
            [resolved, *args],
            cwd=str(cwd) if cwd is not None else None,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(returncode=124, stderr=f"{command} timed out after {timeout} seconds")
    except OSError as e:
        return CommandResult(returncode=126, stderr=f"{command}: {e}")

    return CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
