"""The fixed table of tools this server dispatches to."""

from types import MappingProxyType

from mcpinstall.api.install.cmd_install_local import cmd_install_local
from mcpinstall.api.install.cmd_install_package import cmd_install_package
from mcpinstall.api.install.cmd_list import cmd_list
from mcpinstall.api.install.cmd_uninstall import cmd_uninstall
from mcpinstall.api.pipeline.InstallationOutcome import InstallationOutcome

from .inputs import InstallLocalInput, InstallRepoInput, ListServersInput, UninstallInput
from .run_stage import run_stage
from .ToolSpec import ToolSpec


def _install_repo(params: InstallRepoInput) -> InstallationOutcome:
    return run_stage(cmd_install_package(params.name, params.host.value, params.args, params.env))


def _install_local(params: InstallLocalInput) -> InstallationOutcome:
    host = params.host.value if params.host is not None else None
    return run_stage(cmd_install_local(params.path, host, params.args, params.env))


def _list_servers(params: ListServersInput) -> InstallationOutcome:
    return run_stage(cmd_list(params.host.value))


def _uninstall(params: UninstallInput) -> InstallationOutcome:
    return run_stage(cmd_uninstall(params.name, params.host.value))


TOOLS = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            ToolSpec(
                name="install_repo_mcp_server",
                description="Install an MCP server published to npm or PyPI and register it with a host",
                input_model=InstallRepoInput,
                handler=_install_repo,
            ),
            ToolSpec(
                name="install_local_mcp_server",
                description="Install an MCP server from a local package directory and register it with a host",
                input_model=InstallLocalInput,
                handler=_install_local,
            ),
            ToolSpec(
                name="list_mcp_servers",
                description="List the MCP servers registered with a host",
                input_model=ListServersInput,
                handler=_list_servers,
            ),
            ToolSpec(
                name="uninstall_mcp_server",
                description="Remove an MCP server from a host's configuration",
                input_model=UninstallInput,
                handler=_uninstall,
            ),
        )
    }
)
