"""Uniform result of every install operation."""

from pydantic import BaseModel, ConfigDict

from .FailureKind import FailureKind


class InstallationOutcome(BaseModel):
    """What the dispatcher reports back to the caller."""

    model_config = ConfigDict(extra="forbid")

    succeeded: bool
    message: str
    failure: FailureKind | None = None
