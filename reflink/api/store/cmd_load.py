"""Store load command - seed the store from a fixtures file."""

import json
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from ..config.ReflinkConfig import ReflinkConfig
from ..StageResult import StageResult
from .DatabaseStore import DatabaseStore


def cmd_load(path: str) -> StageResult:
    """Load projects and objects from a JSON fixtures file into the store.

    Args:
        path: JSON file with ``projects`` and ``objects`` lists
    """

    def _fail(result_obj: StageResult, message: str, error: str) -> None:
        result_obj.result = message
        result_obj.output = {
            "errors": [error],
            "warnings": [],
            "path": path,
            "projects_loaded": 0,
            "objects_loaded": 0,
        }
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = ReflinkConfig.load()
        except ValueError as e:
            _fail(result_obj, f"Failed to load configuration: {e}", str(e))
            yield (1.0, "Complete")
            return

        yield (0.3, "Reading fixtures...")
        fixtures_path = Path(path).expanduser()
        try:
            data = json.loads(fixtures_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            _fail(result_obj, f"Failed to read fixtures: {e}", str(e))
            yield (1.0, "Complete")
            return

        yield (0.6, "Writing to store...")
        try:
            with DatabaseStore(config.database, config.base_url) as store:
                projects_loaded, objects_loaded = store.load_fixtures(data)
        except ValidationError as e:
            _fail(result_obj, "Invalid fixtures file", str(e))
            yield (1.0, "Complete")
            return

        result_obj.result = f"Loaded {projects_loaded} project(s) and {objects_loaded} object(s)"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "path": str(fixtures_path),
            "projects_loaded": projects_loaded,
            "objects_loaded": objects_loaded,
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Loading fixtures from {path}...",
        progress_callback=do_work,
    )
