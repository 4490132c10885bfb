"""ReferenceMatch model (UNO: single model)."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReferenceMatch:
    """One occurrence of a reference grammar in a string."""

    text: str
    id: int
    span: tuple[int, int]
    project_token: str | None = None
    anchor: str | None = None
    url: str | None = None
    groups: Mapping[str, str | None] = field(default_factory=dict)
