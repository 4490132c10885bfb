"""ReferenceType model (UNO: single model)."""

from dataclasses import dataclass

from .ReferencePattern import ReferencePattern


@dataclass(frozen=True)
class ReferenceType:
    """Static description of one kind of referenceable object."""

    name: str
    display_name: str
    prefix: str
    route: str
    patterns: ReferencePattern

    @property
    def id_group(self) -> str:
        """Named group that carries the object number in both grammars."""
        return self.name

    @property
    def css_class(self) -> str:
        return f"gfm-{self.name}"

    @property
    def data_name(self) -> str:
        """Data attribute suffix, e.g. ``merge-request``."""
        return self.name.replace("_", "-")

    @property
    def data_reference(self) -> str:
        return f"data-{self.data_name}"
