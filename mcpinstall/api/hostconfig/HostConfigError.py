"""Raised when a host config file cannot be read or written."""

from ..pipeline.FailureKind import FailureKind
from ..pipeline.StepFailure import StepFailure


class HostConfigError(Exception):
    """Host config problem carrying the failure kind to report."""

    def __init__(self, kind: FailureKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_failure(self) -> StepFailure:
        return StepFailure(self.kind, self.message)
