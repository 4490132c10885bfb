"""Deferred lookup of an object recorded on a rendered link."""

from __future__ import annotations

import xml.etree.ElementTree as etree

from ..store.ReferencedObject import ReferencedObject
from ..store.ReferenceStore import ReferenceStore
from .ReferenceType import ReferenceType


class LazyReference:
    """Object id read from a rendered link, fetched from the store on first ``load``."""

    def __init__(self, reference_type: ReferenceType, object_id: int | None, store: ReferenceStore):
        self.reference_type = reference_type
        self.object_id = object_id
        self.store = store
        self._loaded = False
        self._object: ReferencedObject | None = None

    def load(self) -> ReferencedObject | None:
        if not self._loaded:
            if self.object_id is not None:
                self._object = self.store.find_object_by_id(self.reference_type, self.object_id)
            self._loaded = True
        return self._object

    def __repr__(self) -> str:
        return f"LazyReference({self.reference_type.name!r}, {self.object_id!r})"


def referenced_by(element: etree.Element, reference_type: ReferenceType, store: ReferenceStore) -> dict[str, LazyReference]:
    """Map the type name to a lazy reference for the object a rendered link points at."""
    value = element.get(reference_type.data_reference)
    object_id = int(value) if value and value.isdigit() else None
    return {reference_type.name: LazyReference(reference_type, object_id, store)}
