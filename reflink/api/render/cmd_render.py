"""Render command - link references in a markdown or HTML file."""

import xml.etree.ElementTree as etree
from collections.abc import Iterator
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.ReflinkConfig import ReflinkConfig
from ..reference.reference_types import reference_types
from ..StageResult import StageResult
from ..store.DatabaseStore import DatabaseStore
from .render_html import render_html
from .render_markdown import render_markdown

logger = get_logger("render")


def cmd_render(path: str, project: str = "", html: bool = False) -> StageResult:
    """Render a file with references linked.

    Args:
        path: Markdown file, or HTML fragment file when ``html`` is set
        project: Ambient project path (``group/project``); empty renders without one
        html: Treat the file as a well-formed HTML fragment instead of markdown
    """

    def _fail(result_obj: StageResult, message: str, errors: list[str]) -> None:
        result_obj.result = message
        result_obj.output = {
            "errors": errors,
            "warnings": [],
            "path": path,
            "project": project,
            "references": {},
            "html": "",
        }
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = ReflinkConfig.load()
        except ValueError as e:
            _fail(result_obj, f"Failed to load configuration: {e}", [str(e)])
            yield (1.0, "Complete")
            return

        yield (0.2, "Reading source...")
        source_path = Path(path).expanduser()
        try:
            text = source_path.read_text(encoding="utf-8")
        except OSError as e:
            _fail(result_obj, f"Failed to read {source_path}: {e}", [str(e)])
            yield (1.0, "Complete")
            return

        types = reference_types(config.base_url, list(config.render.types))
        warnings: list[str] = []

        yield (0.4, "Resolving project...")
        try:
            with DatabaseStore(config.database, config.base_url) as store:
                ambient = store.find_project(project) if project else None
                if project and ambient is None:
                    warnings.append(f"Project not found: {project}; references left as text")
                elif not project:
                    warnings.append("No project given; references left as text")

                yield (0.6, "Linking references...")
                render = render_html if html else render_markdown
                output_html, rendered = render(
                    text,
                    store,
                    ambient,
                    types,
                    ignore_blockquotes=config.render.ignore_blockquotes,
                    no_original_data=config.render.no_original_data,
                )
        except etree.ParseError as e:
            _fail(result_obj, f"Invalid HTML fragment: {e}", [str(e)])
            yield (1.0, "Complete")
            return
        except Exception as e:
            logger.error("Render of %s failed: %s", source_path, e)
            _fail(result_obj, f"Render failed: {e}", [str(e)])
            yield (1.0, "Complete")
            return

        total = sum(rendered.values())
        logger.info("Rendered %s with %d reference(s)", source_path, total)
        result_obj.result = f"Rendered {total} reference(s)"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "path": str(source_path),
            "project": project,
            "references": rendered,
            "html": output_html,
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Rendering {path}...",
        progress_callback=do_work,
    )
