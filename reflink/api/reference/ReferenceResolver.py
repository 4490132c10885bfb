"""Resolve reference matches to stored objects."""

from __future__ import annotations

from typing import NamedTuple

from ..store.Project import Project
from ..store.ReferencedObject import ReferencedObject
from ..store.ReferenceStore import ReferenceStore
from .ReferenceCache import ReferenceCache
from .ReferenceMatch import ReferenceMatch
from .ReferenceType import ReferenceType


class ResolvedReference(NamedTuple):
    project: Project
    object: ReferencedObject


class ReferenceResolver:
    """Turns a match into the project and object it names, through the cache."""

    def __init__(
        self,
        reference_type: ReferenceType,
        store: ReferenceStore,
        project: Project | None,
        cache: ReferenceCache,
    ):
        """Initialize resolver.

        Args:
            reference_type: Type whose grammar produced the matches
            store: Object store to fall back to on cache misses
            project: Ambient project of the document, used when a match has no project token
            cache: Request cache (or NullReferenceCache)
        """
        self.reference_type = reference_type
        self.store = store
        self.project = project
        self.cache = cache

    def project_for(self, token: str | None) -> Project | None:
        if token is None:
            return self.project
        return self.cache.project_for(token, lambda: self.store.find_project(token))

    def resolve(self, match: ReferenceMatch) -> ResolvedReference | None:
        """Resolve ``match``; None means the reference should stay plain text."""
        project = self.project_for(match.project_token)
        if project is None:
            return None

        obj = self.cache.object_for(
            self.reference_type.name,
            project.id,
            match.id,
            lambda: self.store.find_object(self.reference_type, project, match.id),
        )
        if obj is None:
            return None
        return ResolvedReference(project, obj)
