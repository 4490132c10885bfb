"""Create the main Typer CLI app."""

import typer

from reflink.api.config.ReflinkConfig import ReflinkConfig
from reflink.cli.config import config
from reflink.cli.render import render
from reflink.cli.store import store
from reflink.utils.logger import configure_logging


def _configure_logging() -> None:
    """Start file logging at the configured level, INFO when no config loads."""
    try:
        level = ReflinkConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="reflink - link issue, merge request and snippet references",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="render")(render)
    app.add_typer(store(), name="store")
    app.add_typer(config(), name="config")

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

        _configure_logging()

    return app
