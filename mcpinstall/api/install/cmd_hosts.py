"""Report where each supported host keeps its configuration."""

from collections.abc import Iterator

from ..host.get_host_location import get_host_location
from ..host.HostIdentity import HostIdentity
from ..StageResult import StageResult


def cmd_hosts() -> StageResult:
    """Show each host's config path and whether it is installed.

    Returns:
        StageResult with one record per host
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        hosts = []
        total = len(HostIdentity)
        for index, host in enumerate(HostIdentity):
            yield (index / total, f"Checking {host.display_name}...")
            location = get_host_location(host)
            hosts.append(
                {
                    "host": host.value,
                    "name": host.display_name,
                    "directory": str(location.directory),
                    "config_file": str(location.config_file),
                    "installed": location.is_installed(),
                    "config_exists": location.config_file.is_file(),
                }
            )

        yield (1.0, "Complete")
        installed = sum(1 for h in hosts if h["installed"])
        result_obj.result = f"{installed} of {total} host(s) installed"
        result_obj.output = {"succeeded": True, "message": result_obj.result, "hosts": hosts}
        result_obj.success = True

    return StageResult(
        announce="Checking host applications...",
        progress_callback=do_work,
    )
