"""Request-scoped memoization of reference lookups."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from ...utils.get_logger import get_logger
from ..store.Project import Project
from ..store.ReferencedObject import ReferencedObject

logger = get_logger("reference.cache")

T = TypeVar("T")


def _nested() -> defaultdict[int, dict[Hashable, Any]]:
    return defaultdict(dict)


class ReferenceCache:
    """Memoizes project, object and URL lookups for one rendering request.

    Create one instance per document render and drop it afterwards. Entries
    never expire, and a lookup that found nothing is remembered as None so
    the loader is not asked again. Instances are not thread-safe.
    """

    def __init__(self) -> None:
        self._projects: dict[str, Project | None] = {}
        # object type -> project id -> key -> value, filled lazily
        self._objects: defaultdict[str, defaultdict[int, dict[Hashable, Any]]] = defaultdict(_nested)
        self._urls: defaultdict[str, defaultdict[int, dict[Hashable, Any]]] = defaultdict(_nested)
        self._hits: Counter[str] = Counter()
        self._misses: Counter[str] = Counter()

    def project_for(self, token: str, load: Callable[[], Project | None]) -> Project | None:
        """Project for a foreign-project token."""
        return self._get_or_set("projects", self._projects, token, load)

    def object_for(
        self, type_name: str, project_id: int, iid: int, load: Callable[[], ReferencedObject | None]
    ) -> ReferencedObject | None:
        """Object numbered ``iid`` of type ``type_name`` in project ``project_id``."""
        return self._get_or_set("objects", self._objects[type_name][project_id], iid, load)

    def url_for(self, type_name: str, project_id: int, object_id: int, load: Callable[[], str]) -> str:
        """URL of object ``object_id`` as shown in the context of project ``project_id``."""
        return self._get_or_set("urls", self._urls[type_name][project_id], object_id, load)

    def stats(self) -> dict[str, dict[str, int]]:
        """Hit and miss counts per table."""
        return {
            table: {"hits": self._hits[table], "misses": self._misses[table]}
            for table in ("projects", "objects", "urls")
        }

    def _get_or_set(self, table: str, cache: dict[Any, Any], key: Hashable, load: Callable[[], T]) -> T:
        if key in cache:
            self._hits[table] += 1
            return cache[key]
        self._misses[table] += 1
        logger.debug("Cache miss in %s for %r", table, key)
        value = load()
        cache[key] = value
        return value


class NullReferenceCache(ReferenceCache):
    """Cache used outside a rendering request: every lookup goes to the loader."""

    def _get_or_set(self, table: str, cache: dict[Any, Any], key: Hashable, load: Callable[[], T]) -> T:
        self._misses[table] += 1
        return load()
