"""Run pipeline steps in order, stopping at the first failure."""

from collections.abc import Generator, Sequence

from ...utils.logger import get_logger
from .FailureKind import FailureKind
from .InstallationOutcome import InstallationOutcome
from .InstallContext import InstallContext
from .PipelineStep import PipelineStep

logger = get_logger("pipeline")


def run_pipeline(
    steps: Sequence[PipelineStep], context: InstallContext
) -> Generator[tuple[float, str], None, InstallationOutcome]:
    """Run steps sequentially, yielding progress and returning the outcome.

    Use with ``yield from`` inside a StageResult progress callback. The final
    step is expected to set ``context.message``.

    Returns:
        InstallationOutcome for the first failing step, or success
    """
    total = len(steps)
    for index, step in enumerate(steps):
        yield (index / total if total else 0.0, step.label)
        try:
            failure = step.run(context)
        except Exception as e:
            logger.exception("Step '%s' raised", step.label)
            return InstallationOutcome(
                succeeded=False,
                message=f"{step.label} failed unexpectedly: {e}",
                failure=FailureKind.UNEXPECTED,
            )
        if failure is not None:
            logger.warning("Step '%s' failed (%s): %s", step.label, failure.kind.value, failure.message)
            return InstallationOutcome(succeeded=False, message=failure.message, failure=failure.kind)

    yield (1.0, "Complete")
    return InstallationOutcome(succeeded=True, message=context.message)
