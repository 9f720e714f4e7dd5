"""One labelled step in an install pipeline."""

from collections.abc import Callable
from dataclasses import dataclass

from .InstallContext import InstallContext
from .StepFailure import StepFailure


@dataclass(frozen=True)
class PipelineStep:
    """A named check or action; ``run`` returns a failure or None to continue."""

    label: str
    run: Callable[[InstallContext], StepFailure | None]
