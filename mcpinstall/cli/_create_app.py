"""Create the main Typer CLI app."""

import typer

from mcpinstall.api.install.cmd_hosts import cmd_hosts
from mcpinstall.cli._handle_stage_result import _handle_stage_result
from mcpinstall.cli.install import install
from mcpinstall.cli.servers import servers


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Register MCP servers with Claude Desktop, Cursor and VS Code",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(install(), name="install")
    app.add_typer(servers(), name="servers")

    @app.command(name="hosts")
    def hosts_cmd() -> None:
        """Show where each host keeps its MCP configuration."""
        _handle_stage_result(cmd_hosts)()

    @app.command(name="serve")
    def serve_cmd() -> None:
        """Run the MCP server over stdio."""
        # Inline import keeps CLI startup light
        from mcpinstall.mcp.main import main as mcp_main

        mcp_main()

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
