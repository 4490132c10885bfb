"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from reflink.api.config.ReflinkConfig import ReflinkConfig
from reflink.api.database._mongomock._Impl import _reset_mongomock_client

BASE_URL = "https://git.example.com"


def pytest_configure(config):
    for marker in ("unit", "reference", "store", "render", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid reflink configuration dict for testing."""
    return {
        "base_url": BASE_URL,
        "database": {
            "type": "mongomock",
            "prefix": "reflink_test",
            "data": {},
        },
        "render": {
            "types": ["issue", "merge_request", "snippet"],
            "no_original_data": False,
            "ignore_blockquotes": False,
        },
        "log": {"level": "DEBUG"},
    }


def minimal_reflink_config() -> ReflinkConfig:
    """Build a ReflinkConfig from the minimal config dict."""
    return ReflinkConfig(**minimal_config_dict())


def store_fixtures_dict() -> dict:
    """Two projects with a handful of objects of each type."""
    return {
        "projects": [
            {"id": 1, "path": "group/proj"},
            {"id": 2, "path": "other/lib"},
        ],
        "objects": [
            {"id": 100, "iid": 10, "project_id": 1, "type": "issue", "title": "Crash on start"},
            {"id": 105, "iid": 5, "project_id": 1, "type": "issue", "title": "Slow search"},
            {"id": 203, "iid": 3, "project_id": 2, "type": "issue", "title": "Remote bug"},
            {"id": 420, "iid": 42, "project_id": 1, "type": "merge_request", "title": "Add <b> & widgets"},
            {"id": 700, "iid": 7, "project_id": 1, "type": "snippet", "title": "Setup script"},
        ],
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_mongomock():
    """Every test starts with an empty in-memory database."""
    _reset_mongomock_client()
    yield
    _reset_mongomock_client()


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def reflink_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up REFLINK_HOME with a minimal config file.

    Returns:
        Path to the reflink home directory (tmp_path)
    """
    monkeypatch.setenv("REFLINK_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))
    return tmp_path


@pytest.fixture
def seeded_home(reflink_home: Path) -> Path:
    """REFLINK_HOME whose mongomock store already holds the standard fixtures."""
    from reflink.api.store.DatabaseStore import DatabaseStore

    config = ReflinkConfig.load()
    with DatabaseStore(config.database, config.base_url) as store:
        store.load_fixtures(store_fixtures_dict())
    return reflink_home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
