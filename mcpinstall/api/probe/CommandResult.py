"""Outcome of one external command invocation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of an external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def error_text(self) -> str:
        """Best available description of what went wrong."""
        text = self.stderr.strip() or self.stdout.strip()
        return text or f"exit status {self.returncode}"
