"""Copy a pipeline outcome onto a StageResult."""

from typing import Any

from ..host.HostIdentity import HostIdentity
from ..pipeline.InstallationOutcome import InstallationOutcome
from ..pipeline.InstallContext import InstallContext
from ..StageResult import StageResult


def finish(
    result_obj: StageResult,
    outcome: InstallationOutcome,
    context: InstallContext | None = None,
    **extra: Any,
) -> None:
    """Fill result, output and success from the outcome and what the context resolved."""
    output: dict[str, Any] = outcome.model_dump(mode="json")
    if context is not None:
        output["host"] = context.host.value if isinstance(context.host, HostIdentity) else context.host
        output["server_name"] = context.server_name
        output["entry"] = context.entry.to_json() if context.entry is not None else None
        output["config_file"] = str(context.location.config_file) if context.location is not None else None
    output.update(extra)

    result_obj.result = outcome.message
    result_obj.output = output
    result_obj.success = outcome.succeeded
