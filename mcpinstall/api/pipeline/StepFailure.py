"""Failure variant returned by a pipeline step."""

from dataclasses import dataclass

from .FailureKind import FailureKind


@dataclass(frozen=True)
class StepFailure:
    """A step that could not complete, with a message the caller can act on."""

    kind: FailureKind
    message: str
