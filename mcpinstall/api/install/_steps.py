"""Steps shared by the install, list and uninstall pipelines."""

from ...utils.logger import get_logger
from ..host.get_host_location import get_host_location
from ..host.HostIdentity import HostIdentity
from ..hostconfig.merge_server_entry import merge_server_entry
from ..pipeline.FailureKind import FailureKind
from ..pipeline.InstallContext import InstallContext
from ..pipeline.StepFailure import StepFailure

logger = get_logger("install")


def resolve_host(context: InstallContext) -> StepFailure | None:
    """Validate the host name, then check its config directory exists."""
    try:
        host = HostIdentity.parse(context.host)
    except ValueError as e:
        return StepFailure(FailureKind.HOST_UNKNOWN, str(e))

    location = get_host_location(host)
    logger.info("Checking %s configuration directory %s", host.value, location.directory)
    if not location.is_installed():
        return StepFailure(
            FailureKind.HOST_NOT_INSTALLED,
            f"{host.display_name} is not installed: configuration directory "
            f"{location.directory} does not exist or is not a directory.",
        )

    context.host = host
    context.location = location
    return None


def unresolved(what: str) -> StepFailure:
    """Failure for a step reached before an earlier step filled in ``what``."""
    return StepFailure(FailureKind.UNEXPECTED, f"Cannot continue: {what} was not resolved by an earlier step")


def register_entry(context: InstallContext) -> StepFailure | None:
    """Merge the resolved entry into the host config and compose the success message."""
    if context.location is None:
        return unresolved("host location")
    if context.entry is None or not context.server_name:
        return unresolved("server entry")
    failure = merge_server_entry(context.location.config_file, context.server_name, context.entry)
    if failure is not None:
        return failure

    host = context.location.host
    context.message = (
        f"Installed MCP server '{context.server_name}' via {context.entry.command} "
        f"for {host.display_name} ({context.location.config_file}). "
        f"Restart {host.display_name} for the changes to take effect."
    )
    if context.notes:
        context.message = f"{context.message} {' '.join(context.notes)}"
    return None
