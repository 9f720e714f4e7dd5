"""Servers Typer app factory."""

import typer

from mcpinstall.api.install.cmd_list import cmd_list
from mcpinstall.api.install.cmd_uninstall import cmd_uninstall
from mcpinstall.cli._handle_stage_result import _handle_stage_result


def servers() -> typer.Typer:
    """Create and configure the servers Typer app."""
    app = typer.Typer(
        name="servers",
        help="Inspect and remove registered MCP servers",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Server operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd(
        host: str = typer.Option(..., "--host", help="Host application: claude, cursor or vscode"),
    ) -> None:
        """List MCP servers registered with a host."""
        _handle_stage_result(cmd_list)(host)

    @app.command(name="uninstall")
    def uninstall_cmd(
        name: str = typer.Argument(..., help="Server name"),
        host: str = typer.Option(..., "--host", help="Host application: claude, cursor or vscode"),
    ) -> None:
        """Remove an MCP server from a host."""
        _handle_stage_result(cmd_uninstall)(name, host)

    return app
