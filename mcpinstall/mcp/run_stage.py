"""Drive a StageResult to completion and reduce it to an outcome."""

from mcpinstall.api.pipeline.FailureKind import FailureKind
from mcpinstall.api.pipeline.InstallationOutcome import InstallationOutcome
from mcpinstall.api.StageResult import StageResult


def run_stage(result: StageResult) -> InstallationOutcome:
    list(result.progress_callback(result))
    failure = result.output.get("failure")
    return InstallationOutcome(
        succeeded=result.success,
        message=result.result,
        failure=FailureKind(failure) if failure else None,
    )
