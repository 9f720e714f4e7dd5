"""List MCP servers registered with a host."""

from collections.abc import Iterator
from typing import Any

from ...constants import MCP_SERVERS_KEY
from ..config.InstallerConfig import InstallerConfig
from ..hostconfig.HostConfigError import HostConfigError
from ..hostconfig.read_host_config import read_host_config
from ..pipeline.FailureKind import FailureKind
from ..pipeline.InstallationOutcome import InstallationOutcome
from ..pipeline.InstallContext import InstallContext
from ..pipeline.PipelineStep import PipelineStep
from ..pipeline.run_pipeline import run_pipeline
from ..pipeline.StepFailure import StepFailure
from ..StageResult import StageResult
from ._finish import finish
from ._steps import resolve_host, unresolved


def cmd_list(host: str) -> StageResult:
    """List MCP servers registered in a host's configuration.

    Args:
        host: Host application (claude, cursor or vscode)

    Returns:
        StageResult with the registered servers
    """
    servers: list[dict[str, Any]] = []

    def read_servers(context: InstallContext) -> StepFailure | None:
        if context.location is None:
            return unresolved("host location")
        try:
            data = read_host_config(context.location.config_file)
        except HostConfigError as e:
            return e.to_failure()
        for name, entry in (data.get(MCP_SERVERS_KEY) or {}).items():
            entry = entry if isinstance(entry, dict) else {}
            servers.append({"name": name, "command": entry.get("command"), "args": entry.get("args", [])})
        names = ", ".join(s["name"] for s in servers) or "none"
        context.message = f"Found {len(servers)} server(s) in {context.location.config_file}: {names}"
        return None

    steps = [
        PipelineStep("Locating host configuration", resolve_host),
        PipelineStep("Reading servers", read_servers),
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
        finish(result_obj, outcome, context, servers=servers, count=len(servers))

    return StageResult(
        announce=f"Listing MCP servers for {host}...",
        progress_callback=do_work,
    )
