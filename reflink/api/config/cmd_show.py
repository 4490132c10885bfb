"""Show configuration command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .ReflinkConfig import ReflinkConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or list the section names.

    Args:
        section: Section name; empty string lists the sections
    """
    config_path = str(ReflinkConfig.get_config_path())

    def _finish(result_obj: StageResult, message: str, content: dict[str, Any], error: str = "") -> None:
        result_obj.result = message
        result_obj.output = {
            "errors": [error] if error else [],
            "warnings": [],
            "section": section,
            "content": content,
            "config_path": config_path,
        }
        result_obj.success = not error

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            sections = ReflinkConfig.load().to_dict()
        except ValueError as e:
            _finish(result_obj, f"Failed to load configuration: {e}", {}, str(e))
            yield (1.0, "Complete")
            return

        yield (0.6, "Processing sections...")
        if not section:
            _finish(result_obj, f"Found {len(sections)} section(s)", {"sections": list(sections)})
        elif section not in sections:
            _finish(result_obj, f"Section '{section}' not found", {}, f"Unknown section: {section}")
        else:
            value = sections[section]
            content = value if isinstance(value, dict) else {section: value}
            _finish(result_obj, f"Retrieved configuration for '{section}'", content)
        yield (1.0, "Complete")

    announce = f"Showing configuration for section '{section}'..." if section else "Listing configuration sections..."
    return StageResult(announce=announce, progress_callback=do_work)
