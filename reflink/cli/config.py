"""Config Typer app factory."""

from typing import Annotated

import typer

from reflink.api.config.cmd_show import cmd_show
from reflink.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Show configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        section: Annotated[str, typer.Argument(help="Section name; omit to list sections")] = "",
    ) -> None:
        """List configuration sections, or show one section."""
        _handle_stage_result(cmd_show)(section)

    return app
