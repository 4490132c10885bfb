"""Unit test fixtures.

Configuration helpers are in tests/conftest.py. This file holds an
in-memory ReferenceStore that counts every lookup.
"""

from collections import Counter

import pytest

from reflink.api.reference.reference_types import reference_types
from reflink.api.reference.ReferenceType import ReferenceType
from reflink.api.store.Project import Project
from reflink.api.store.ReferencedObject import ReferencedObject
from reflink.api.store.ReferenceStore import ReferenceStore
from tests.conftest import BASE_URL, minimal_config_dict, run_cmd, store_fixtures_dict

__all__ = [
    "BASE_URL",
    "CountingStore",
    "minimal_config_dict",
    "run_cmd",
    "store_fixtures_dict",
]


class CountingStore(ReferenceStore):
    """ReferenceStore over plain dicts, with a call counter per method."""

    def __init__(self, fixtures: dict | None = None):
        fixtures = fixtures if fixtures is not None else store_fixtures_dict()
        self.calls: Counter[str] = Counter()
        self.projects = {p["path"]: Project(id=p["id"], path=p["path"]) for p in fixtures["projects"]}
        paths = {p["id"]: p["path"] for p in fixtures["projects"]}
        self.objects = {
            (o["type"], o["project_id"], o["iid"]): ReferencedObject(
                id=o["id"],
                iid=o["iid"],
                project_id=o["project_id"],
                project_path=paths[o["project_id"]],
                title=o["title"],
                type_name=o["type"],
            )
            for o in fixtures["objects"]
        }

    def find_project(self, token):
        self.calls["find_project"] += 1
        return self.projects.get(token)

    def find_object(self, reference_type, project, iid):
        self.calls["find_object"] += 1
        return self.objects.get((reference_type.name, project.id, iid))

    def find_object_by_id(self, reference_type, object_id):
        self.calls["find_object_by_id"] += 1
        for obj in self.objects.values():
            if obj.type_name == reference_type.name and obj.id == object_id:
                return obj
        return None

    def url_for(self, reference_type, obj, project):
        self.calls["url_for"] += 1
        return f"{BASE_URL}/{project.path}/{reference_type.route}/{obj.iid}"

    def link_text(self, reference_type, obj, ambient_project):
        self.calls["link_text"] += 1
        reference = f"{reference_type.prefix}{obj.iid}"
        return reference if obj.project_id == ambient_project.id else f"{obj.project_path}{reference}"


@pytest.fixture
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture
def project(store: CountingStore) -> Project:
    """Ambient project ``group/proj``."""
    return store.projects["group/proj"]


@pytest.fixture
def types() -> dict[str, ReferenceType]:
    return {t.name: t for t in reference_types(BASE_URL)}


@pytest.fixture
def issue_type(types) -> ReferenceType:
    return types["issue"]


@pytest.fixture
def merge_request_type(types) -> ReferenceType:
    return types["merge_request"]
