"""Reference linking over an HTML fragment (UNO: single function)."""

import xml.etree.ElementTree as etree

from markdown.serializers import to_html_string

from ..reference.DocumentRewriter import DocumentRewriter
from ..reference.ReferenceCache import ReferenceCache
from ..reference.ReferenceType import ReferenceType
from ..store.Project import Project
from ..store.ReferenceStore import ReferenceStore

_WRAPPER = "div"


def render_html(
    fragment: str,
    store: ReferenceStore,
    project: Project | None,
    types: list[ReferenceType],
    ignore_blockquotes: bool = False,
    no_original_data: bool = False,
) -> tuple[str, dict[str, int]]:
    """Link references inside a well-formed (XHTML) fragment.

    Returns:
        (html, rendered reference count per type name)

    Raises:
        xml.etree.ElementTree.ParseError: If the fragment is not well-formed
    """
    root = etree.fromstring(f"<{_WRAPPER}>{fragment}</{_WRAPPER}>")
    cache = ReferenceCache()
    rendered: dict[str, int] = {}
    for reference_type in types:
        rewriter = DocumentRewriter(
            reference_type,
            store,
            project,
            cache=cache,
            ignore_blockquotes=ignore_blockquotes,
            no_original_data=no_original_data,
        )
        rewriter.rewrite(root)
        rendered[reference_type.name] = rewriter.rendered

    html = to_html_string(root)
    return html[len(f"<{_WRAPPER}>") : -len(f"</{_WRAPPER}>")], rendered
