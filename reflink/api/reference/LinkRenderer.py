"""Build rendered links for resolved references."""

from __future__ import annotations

import re

from ..store.Project import Project
from ..store.ReferencedObject import ReferencedObject
from ..store.ReferenceStore import ReferenceStore
from .ReferenceCache import ReferenceCache
from .ReferenceMatch import ReferenceMatch
from .ReferenceType import ReferenceType
from .RenderedLink import RenderedLink

NOTE_ANCHOR = re.compile(r"\#note_(\d+)")
REFERENCE_CLASS = "gfm"


class LinkRenderer:
    """Produces href, title, text, classes and data attributes for one reference type."""

    def __init__(
        self,
        reference_type: ReferenceType,
        store: ReferenceStore,
        project: Project | None,
        cache: ReferenceCache,
        no_original_data: bool = False,
    ):
        self.reference_type = reference_type
        self.store = store
        self.project = project
        self.cache = cache
        self.no_original_data = no_original_data

    def render(
        self,
        obj: ReferencedObject,
        project: Project,
        match: ReferenceMatch,
        link_text: str | None = None,
    ) -> RenderedLink:
        """Render ``obj``, found through ``match`` in ``project``.

        Args:
            obj: Resolved object
            project: Project the object was resolved in
            match: Match the object was resolved from
            link_text: Existing text of a link being rewritten; kept as the visible text
        """
        data: list[tuple[str, str]] = []
        if not self.no_original_data:
            data.append(("original", link_text if link_text is not None else match.text))
        data.append(("project", str(project.id)))
        data.append((self.reference_type.data_name, str(obj.id)))
        data.append(("reference-type", self.reference_type.name))

        return RenderedLink(
            href=match.url or self.url_for(obj, project),
            text=link_text if link_text is not None else self.link_text(obj, project, match),
            title=self.title(obj),
            classes=(REFERENCE_CLASS, self.reference_type.css_class),
            data=tuple(data),
        )

    def title(self, obj: ReferencedObject) -> str:
        return f"{self.reference_type.display_name}: {obj.title}"

    def url_for(self, obj: ReferencedObject, project: Project) -> str:
        return self.cache.url_for(
            self.reference_type.name,
            project.id,
            obj.id,
            lambda: self.store.url_for(self.reference_type, obj, project),
        )

    def link_text(self, obj: ReferencedObject, project: Project, match: ReferenceMatch) -> str:
        ambient = self.project if self.project is not None else project
        text = self.store.link_text(self.reference_type, obj, ambient)

        extras = self.link_text_extras(obj, match)
        if extras:
            text += f" ({', '.join(extras)})"
        return text

    def link_text_extras(self, obj: ReferencedObject, match: ReferenceMatch) -> list[str]:
        extras: list[str] = []
        if match.anchor:
            note = NOTE_ANCHOR.fullmatch(match.anchor)
            if note:
                extras.append(f"comment {note.group(1)}")
        return extras
