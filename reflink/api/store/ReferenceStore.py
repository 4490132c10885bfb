"""Abstract object store that references resolve against."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .Project import Project
from .ReferencedObject import ReferencedObject

if TYPE_CHECKING:
    from ..reference.ReferenceType import ReferenceType


class ReferenceStore(ABC):
    """Lookups and URL building used by reference linking.

    Every method is called synchronously from the rewriting pass. Lookups
    return None when nothing matches; any exception propagates to the caller.
    """

    @abstractmethod
    def find_project(self, token: str) -> Project | None:
        """Resolve a foreign-project token such as ``group/project``."""

    @abstractmethod
    def find_object(self, reference_type: ReferenceType, project: Project, iid: int) -> ReferencedObject | None:
        """Find the object numbered ``iid`` inside ``project``."""

    @abstractmethod
    def find_object_by_id(self, reference_type: ReferenceType, object_id: int) -> ReferencedObject | None:
        """Find an object by its type-wide id, as recorded on rendered links."""

    @abstractmethod
    def url_for(self, reference_type: ReferenceType, obj: ReferencedObject, project: Project) -> str:
        """Build the canonical URL of ``obj`` shown in the context of ``project``."""

    @abstractmethod
    def link_text(self, reference_type: ReferenceType, obj: ReferencedObject, ambient_project: Project) -> str:
        """Canonical reference text of ``obj`` as seen from ``ambient_project``."""
