"""Install an MCP server from a local package directory."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..config.InstallerConfig import InstallerConfig
from ..local.discover_entry_points import discover_entry_points
from ..local.install_dependencies import install_dependencies
from ..local.read_manifest import MANIFEST_FILE_NAME, read_manifest
from ..pipeline.FailureKind import FailureKind
from ..pipeline.InstallationOutcome import InstallationOutcome
from ..pipeline.InstallContext import InstallContext
from ..pipeline.PipelineStep import PipelineStep
from ..pipeline.run_pipeline import run_pipeline
from ..pipeline.StepFailure import StepFailure
from ..server.parse_env import parse_env
from ..server.ServerEntry import ServerEntry
from ..StageResult import StageResult
from ._finish import finish
from ._steps import register_entry, resolve_host, unresolved

logger = get_logger("install")


def cmd_install_local(
    path: str,
    host: str | None = None,
    args: list[str] | None = None,
    env: list[str] | None = None,
) -> StageResult:
    """Install an MCP server from a local directory containing a package.json.

    Only the first declared binary is registered; any others are reported as skipped.

    Args:
        path: Package directory
        host: Host application (default from installer config)
        args: Extra arguments appended after the entry point path
        env: Environment variables as KEY=VALUE strings

    Returns:
        StageResult with the installation outcome
    """
    directory = Path(path).expanduser().absolute() if path else None

    def check_directory(context: InstallContext) -> StepFailure | None:
        if directory is None:
            return StepFailure(FailureKind.INVALID_INPUT, "A package directory path is required")
        if not directory.exists():
            return StepFailure(FailureKind.LOCAL_PATH_NOT_FOUND, f"Path {directory} does not exist locally")
        if not directory.is_dir():
            return StepFailure(FailureKind.LOCAL_PATH_NOT_FOUND, f"Path {directory} is not a directory")
        if not (directory / MANIFEST_FILE_NAME).is_file():
            return StepFailure(
                FailureKind.NO_MANIFEST,
                f"No {MANIFEST_FILE_NAME} found in {directory}; a local install needs a package manifest",
            )
        try:
            read_manifest(directory)
        except ValueError as e:
            return StepFailure(FailureKind.INVALID_INPUT, f"Invalid {MANIFEST_FILE_NAME} in {directory}: {e}")
        except OSError as e:
            return StepFailure(FailureKind.NO_MANIFEST, f"Could not read {MANIFEST_FILE_NAME} in {directory}: {e}")
        context.package_dir = directory
        return None

    def install(context: InstallContext) -> StepFailure | None:
        if context.package_dir is None:
            return unresolved("package directory")
        result = install_dependencies(context.package_dir, context.config.runtimes)
        if not result.ok:
            return StepFailure(
                FailureKind.INSTALL_FAILED,
                f"Installation failed in {context.package_dir}: {result.error_text}",
            )
        return None

    def discover(context: InstallContext) -> StepFailure | None:
        if context.package_dir is None:
            return unresolved("package directory")
        try:
            manifest = read_manifest(context.package_dir)
        except ValueError as e:
            return StepFailure(FailureKind.INVALID_INPUT, f"Invalid {MANIFEST_FILE_NAME} after install: {e}")
        except OSError as e:
            return StepFailure(FailureKind.NO_MANIFEST, f"Could not read {MANIFEST_FILE_NAME} after install: {e}")

        context.entry_points = discover_entry_points(context.package_dir, manifest)
        if not context.entry_points:
            return StepFailure(
                FailureKind.NO_EXECUTABLES_FOUND,
                f"No executable servers found in {context.package_dir}: "
                f"{MANIFEST_FILE_NAME} declares neither 'bin' nor 'main'",
            )

        names = list(context.entry_points)
        server_name = names[0]
        if len(names) > 1:
            logger.warning("Registering only '%s'; skipping %s", server_name, ", ".join(names[1:]))
            context.notes.append(f"Skipped additional binaries: {', '.join(names[1:])}.")

        context.server_name = server_name
        context.entry = ServerEntry(
            command=context.config.runtimes.node,
            args=[str(context.entry_points[server_name]), *context.args],
            env=context.env,
        )
        return None

    steps = [
        PipelineStep("Locating host configuration", resolve_host),
        PipelineStep("Checking package directory", check_directory),
        PipelineStep("Installing dependencies", install),
        PipelineStep("Discovering entry points", discover),
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

        context = InstallContext(
            config=config,
            host=host or config.default_host,
            args=list(args or []),
            env=parse_env(env),
        )
        outcome = yield from run_pipeline(steps, context)
        finish(
            result_obj,
            outcome,
            context,
            path=str(directory) if directory is not None else None,
            entry_points={name: str(p) for name, p in context.entry_points.items()},
        )

    return StageResult(
        announce=f"Installing MCP server from {directory}...",
        progress_callback=do_work,
    )
