"""Project model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """A project that references are scoped to."""

    id: int
    path: str
