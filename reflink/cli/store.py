"""Store Typer app factory."""

import typer

from reflink.api.store.cmd_load import cmd_load
from reflink.cli._handle_stage_result import _handle_stage_result


def store() -> typer.Typer:
    """Create and configure the store Typer app."""
    app = typer.Typer(
        name="store",
        help="Reference store operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="load")
    def load_cmd(
        path: str = typer.Argument(..., help="JSON fixtures file with projects and objects"),
    ) -> None:
        """Load projects and objects into the store."""
        _handle_stage_result(cmd_load)(path)

    return app
