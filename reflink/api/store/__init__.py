"""Store API module - lookups that references resolve against."""

from .DatabaseStore import DatabaseStore
from .Project import Project
from .ReferencedObject import ReferencedObject
from .ReferenceStore import ReferenceStore

__all__ = ["DatabaseStore", "Project", "ReferenceStore", "ReferencedObject"]
