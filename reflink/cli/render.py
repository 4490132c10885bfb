"""Render command for the main Typer app."""

from typing import Annotated

import typer

from reflink.api.render.cmd_render import cmd_render
from reflink.cli._handle_stage_result import _handle_stage_result


def _print_html(output: dict) -> None:
    typer.echo(output["html"])


def render(
    path: Annotated[str, typer.Argument(help="Markdown file, or HTML fragment with --html")],
    project: Annotated[str, typer.Option("--project", "-p", help="Ambient project path (group/project)")] = "",
    html: Annotated[bool, typer.Option("--html", help="Treat PATH as a well-formed HTML fragment")] = False,
    raw: Annotated[bool, typer.Option("--raw", help="Print only the rendered HTML")] = False,
) -> None:
    """Link references in PATH and print the result."""
    _handle_stage_result(cmd_render, result_printer=_print_html if raw else None)(path, project, html)
