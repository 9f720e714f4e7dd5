"""Remove an MCP server from a host configuration."""

from collections.abc import Iterator

from ..config.InstallerConfig import InstallerConfig
from ..hostconfig.remove_server_entry import remove_server_entry
from ..pipeline.FailureKind import FailureKind
from ..pipeline.InstallationOutcome import InstallationOutcome
from ..pipeline.InstallContext import InstallContext
from ..pipeline.PipelineStep import PipelineStep
from ..pipeline.run_pipeline import run_pipeline
from ..pipeline.StepFailure import StepFailure
from ..StageResult import StageResult
from ._finish import finish
from ._steps import resolve_host, unresolved


def cmd_uninstall(name: str, host: str) -> StageResult:
    """Remove a named MCP server from a host's configuration.

    Args:
        name: Server name as it appears under mcpServers
        host: Host application (claude, cursor or vscode)

    Returns:
        StageResult with the uninstall outcome
    """

    def remove(context: InstallContext) -> StepFailure | None:
        if context.location is None:
            return unresolved("host location")
        if not name:
            return StepFailure(FailureKind.INVALID_INPUT, "A server name is required")
        failure = remove_server_entry(context.location.config_file, name)
        if failure is not None:
            return failure
        context.server_name = name
        display_name = context.location.host.display_name
        context.message = (
            f"Removed MCP server '{name}' from {display_name} ({context.location.config_file}). "
            f"Restart {display_name} for the changes to take effect."
        )
        return None

    steps = [
        PipelineStep("Locating host configuration", resolve_host),
        PipelineStep("Removing server", remove),
    ]

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.0, "Loading configuration...")
        try:
            config = InstallerConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            finish(result_obj, InstallationOutcome(succeeded=False, message=str(e), failure=FailureKind.INVALID_INPUT))
            return

        context = InstallContext(config=config, host=host)
        outcome = yield from run_pipeline(steps, context)
        finish(result_obj, outcome, context)

    return StageResult(
        announce=f"Uninstalling MCP server '{name}' from {host}...",
        progress_callback=do_work,
    )
