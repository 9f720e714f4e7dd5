"""Ordered install pipeline with short-circuiting failure variants."""

from .FailureKind import FailureKind
from .InstallContext import InstallContext
from .InstallationOutcome import InstallationOutcome
from .PipelineStep import PipelineStep
from .StepFailure import StepFailure
from .run_pipeline import run_pipeline

__all__ = [
    "FailureKind",
    "InstallContext",
    "InstallationOutcome",
    "PipelineStep",
    "StepFailure",
    "run_pipeline",
]
