"""ReferencedObject model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReferencedObject:
    """An issue, merge request or snippet that a reference points at.

    ``iid`` is the per-project number written in references (``#5``),
    ``id`` is unique within the object type.
    """

    id: int
    iid: int
    project_id: int
    project_path: str
    title: str
    type_name: str
