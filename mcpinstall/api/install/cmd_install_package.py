"""Install a published MCP server package into a host configuration."""

from collections.abc import Iterator

from ...utils.logger import get_logger
from ..config.InstallerConfig import InstallerConfig
from ..pipeline.FailureKind import FailureKind
from ..pipeline.InstallationOutcome import InstallationOutcome
from ..pipeline.InstallContext import InstallContext
from ..pipeline.PipelineStep import PipelineStep
from ..pipeline.run_pipeline import run_pipeline
from ..pipeline.StepFailure import StepFailure
from ..probe.package_exists import package_exists
from ..probe.probe import probe
from ..server.parse_env import parse_env
from ..server.server_name_for_package import server_name_for_package
from ..server.ServerEntry import ServerEntry
from ..StageResult import StageResult
from ._finish import finish
from ._steps import register_entry, resolve_host

logger = get_logger("install")


def cmd_install_package(
    name: str,
    host: str,
    args: list[str] | None = None,
    env: list[str] | None = None,
) -> StageResult:
    """Install a published MCP server package (npm first, uvx as fallback).

    Args:
        name: Package name, optionally scoped (``@scope/tool``)
        host: Host application (claude, cursor or vscode)
        args: Extra arguments appended after the package name
        env: Environment variables as KEY=VALUE strings

    Returns:
        StageResult with the installation outcome
    """
    package_name = (name or "").strip()

    def check_name(context: InstallContext) -> StepFailure | None:
        if not package_name:
            return StepFailure(FailureKind.INVALID_INPUT, "A package name is required")
        return None

    def check_node(context: InstallContext) -> StepFailure | None:
        runtimes = context.config.runtimes
        if not probe(runtimes.node, timeout=runtimes.command_timeout):
            return StepFailure(
                FailureKind.RUNTIME_MISSING,
                f"Node.js is not installed ('{runtimes.node} --version' failed). "
                f"Please install it from {runtimes.node_install_url}",
            )
        return None

    def choose_runner(context: InstallContext) -> StepFailure | None:
        runtimes = context.config.runtimes
        if package_exists(package_name, runtimes):
            command = runtimes.npx
        else:
            logger.info("Package '%s' not found in the npm registry, trying %s", package_name, runtimes.uvx)
            if not probe(runtimes.uvx, timeout=runtimes.command_timeout):
                return StepFailure(
                    FailureKind.RUNTIME_MISSING,
                    f"Package '{package_name}' was not found in the npm registry and "
                    f"Python uv ('{runtimes.uvx}') is not installed. "
                    f"Please install uv from {runtimes.uv_install_url} and try again.",
                )
            command = runtimes.uvx

        context.server_name = server_name_for_package(package_name)
        context.entry = ServerEntry(command=command, args=[package_name, *context.args], env=context.env)
        return None

    steps = [
        PipelineStep("Validating package name", check_name),
        PipelineStep("Locating host configuration", resolve_host),
        PipelineStep("Checking Node.js", check_node),
        PipelineStep("Resolving package runner", choose_runner),
        PipelineStep("Registering server", register_entry),
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

        context = InstallContext(config=config, host=host, args=list(args or []), env=parse_env(env))
        outcome = yield from run_pipeline(steps, context)
        finish(result_obj, outcome, context, package=package_name)

    return StageResult(
        announce=f"Installing MCP server package '{package_name}' for {host}...",
        progress_callback=do_work,
    )
