"""Reference store backed by the database facade."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...utils.get_logger import get_logger
from ..database.Database import Database
from ..database.DatabaseConfig import DatabaseConfig
from .Project import Project
from .ReferencedObject import ReferencedObject
from .ReferenceStore import ReferenceStore
from .StoreFixtures import StoreFixtures

if TYPE_CHECKING:
    from ..reference.ReferenceType import ReferenceType

logger = get_logger("store")

PROJECTS_COLLECTION = "projects"
OBJECTS_COLLECTION = "objects"


class DatabaseStore(ReferenceStore):
    """Store reading projects and objects from two collections.

    ``projects`` documents: ``{"id", "path"}``.
    ``objects`` documents: ``{"id", "iid", "project_id", "type", "title"}``.

    Use as a context manager; both collections stay open for its lifetime.
    """

    def __init__(self, database_config: DatabaseConfig, base_url: str):
        self.database_config = database_config
        self.base_url = base_url.rstrip("/")
        self._projects: Database | None = None
        self._objects: Database | None = None

    def __enter__(self) -> DatabaseStore:
        # One connection serves both collections
        self._projects = Database(self.database_config, PROJECTS_COLLECTION).__enter__()
        self._objects = self._projects.collection(OBJECTS_COLLECTION)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        projects = self._projects
        self._projects = None
        self._objects = None
        if projects is not None:
            projects.__exit__(exc_type, exc_val, exc_tb)
        return False

    def _collections(self) -> tuple[Database, Database]:
        if self._projects is None or self._objects is None:
            raise RuntimeError("Store not opened. Use as context manager first.")
        return self._projects, self._objects

    def find_project(self, token: str) -> Project | None:
        projects, _ = self._collections()
        logger.debug("Looking up project %r", token)
        doc = projects.find_one({"path": token}, {"_id": 0})
        return Project(id=doc["id"], path=doc["path"]) if doc else None

    def find_object(self, reference_type: ReferenceType, project: Project, iid: int) -> ReferencedObject | None:
        _, objects = self._collections()
        logger.debug("Looking up %s %d in project %d", reference_type.name, iid, project.id)
        doc = objects.find_one({"type": reference_type.name, "project_id": project.id, "iid": iid}, {"_id": 0})
        return self._to_object(doc, project.path) if doc else None

    def find_object_by_id(self, reference_type: ReferenceType, object_id: int) -> ReferencedObject | None:
        projects, objects = self._collections()
        doc = objects.find_one({"type": reference_type.name, "id": object_id}, {"_id": 0})
        if not doc:
            return None
        project_doc = projects.find_one({"id": doc["project_id"]}, {"_id": 0})
        if not project_doc:
            return None
        return self._to_object(doc, project_doc["path"])

    def url_for(self, reference_type: ReferenceType, obj: ReferencedObject, project: Project) -> str:
        return f"{self.base_url}/{project.path}/{reference_type.route}/{obj.iid}"

    def link_text(self, reference_type: ReferenceType, obj: ReferencedObject, ambient_project: Project) -> str:
        reference = f"{reference_type.prefix}{obj.iid}"
        if obj.project_id == ambient_project.id:
            return reference
        return f"{obj.project_path}{reference}"

    def load_fixtures(self, data: dict[str, Any]) -> tuple[int, int]:
        """Upsert projects and objects from a fixtures dict.

        Returns:
            (projects written, objects written)

        Raises:
            pydantic.ValidationError: If the fixtures do not match StoreFixtures
        """
        projects, objects = self._collections()
        fixtures = StoreFixtures(**data)
        for project in fixtures.projects:
            projects.update_one({"id": project.id}, {"$set": project.model_dump()}, upsert=True)
        for obj in fixtures.objects:
            objects.update_one({"type": obj.type, "id": obj.id}, {"$set": obj.model_dump()}, upsert=True)
        logger.info("Loaded %d project(s) and %d object(s)", len(fixtures.projects), len(fixtures.objects))
        return len(fixtures.projects), len(fixtures.objects)

    @staticmethod
    def _to_object(doc: dict[str, Any], project_path: str) -> ReferencedObject:
        return ReferencedObject(
            id=doc["id"],
            iid=doc["iid"],
            project_id=doc["project_id"],
            project_path=project_path,
            title=doc["title"],
            type_name=doc["type"],
        )
