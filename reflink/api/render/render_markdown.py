"""Markdown to HTML with reference linking (UNO: single function)."""

import markdown

from ..reference.ReferenceCache import ReferenceCache
from ..reference.ReferenceExtension import ReferenceExtension
from ..reference.ReferenceType import ReferenceType
from ..store.Project import Project
from ..store.ReferenceStore import ReferenceStore

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


def render_markdown(
    text: str,
    store: ReferenceStore,
    project: Project | None,
    types: list[ReferenceType],
    ignore_blockquotes: bool = False,
    no_original_data: bool = False,
) -> tuple[str, dict[str, int]]:
    """Convert markdown ``text`` to HTML, linking references along the way.

    Returns:
        (html, rendered reference count per type name)
    """
    extension = ReferenceExtension(
        store,
        project,
        types,
        cache=ReferenceCache(),
        ignore_blockquotes=ignore_blockquotes,
        no_original_data=no_original_data,
    )
    md = markdown.Markdown(extensions=[*MARKDOWN_EXTENSIONS, extension])
    html = md.convert(text)
    return html, extension.rendered()
