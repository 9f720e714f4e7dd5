"""Install Typer app factory."""

import typer

from mcpinstall.api.install.cmd_install_local import cmd_install_local
from mcpinstall.api.install.cmd_install_package import cmd_install_package
from mcpinstall.cli._handle_stage_result import _handle_stage_result


def install() -> typer.Typer:
    """Create and configure the install Typer app."""
    app = typer.Typer(
        name="install",
        help="Register MCP servers with a host application",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Install operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="package")
    def package_cmd(
        name: str = typer.Argument(..., help="npm or PyPI package name"),
        host: str = typer.Option(..., "--host", help="Host application: claude, cursor or vscode"),
        args: list[str] = typer.Option(None, "--arg", help="Extra server argument (repeatable)"),
        env: list[str] = typer.Option(None, "--env", help="KEY=VALUE environment variable (repeatable)"),
    ) -> None:
        """Install a published MCP server package."""
        _handle_stage_result(cmd_install_package)(name, host, args or None, env or None)

    @app.command(name="local")
    def local_cmd(
        path: str = typer.Argument(..., help="Local package directory"),
        host: str | None = typer.Option(None, "--host", help="Host application: claude, cursor or vscode"),
        args: list[str] = typer.Option(None, "--arg", help="Extra server argument (repeatable)"),
        env: list[str] = typer.Option(None, "--env", help="KEY=VALUE environment variable (repeatable)"),
    ) -> None:
        """Install an MCP server from a local package directory."""
        _handle_stage_result(cmd_install_local)(path, host, args or None, env or None)

    return app
