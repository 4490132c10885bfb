"""Single-pass reference rewriting over an element tree."""

from __future__ import annotations

import re
import xml.etree.ElementTree as etree
from urllib.parse import unquote

from ...utils.get_logger import get_logger
from ..store.Project import Project
from ..store.ReferenceStore import ReferenceStore
from .find_matches import find_matches
from .LinkRenderer import REFERENCE_CLASS, LinkRenderer
from .ReferenceCache import NullReferenceCache, ReferenceCache
from .ReferenceResolver import ReferenceResolver
from .ReferenceType import ReferenceType
from .RenderedLink import RenderedLink

logger = get_logger("reference.rewriter")

# Text below these elements is never scanned for references
IGNORED_ANCESTORS = frozenset({"pre", "code", "a", "style"})

Piece = str | RenderedLink


def is_reference_link(element: etree.Element) -> bool:
    """True if ``element`` is a link produced by reference rendering."""
    return element.tag == "a" and REFERENCE_CLASS in (element.get("class") or "").split()


class DocumentRewriter:
    """Replaces references of one type in a document tree with rendered links.

    Text nodes (an element's ``text`` and each child's ``tail``) are scanned
    with the short grammar. Links are checked, in order, for a short-form
    href, a pasted URL whose text is its href, and a link-form href. Nodes
    created during the pass are never visited again.
    """

    def __init__(
        self,
        reference_type: ReferenceType,
        store: ReferenceStore,
        project: Project | None,
        cache: ReferenceCache | None = None,
        ignore_blockquotes: bool = False,
        no_original_data: bool = False,
    ):
        """Initialize rewriter.

        Args:
            reference_type: Type of reference to link
            store: Object store
            project: Ambient project; None turns ``rewrite`` into a no-op
            cache: Request cache shared by every rewriter of the same document.
                None means no request scope: lookups go straight to the store.
            ignore_blockquotes: Also skip text inside blockquotes
            no_original_data: Leave ``data-original`` off rendered links
        """
        self.reference_type = reference_type
        self.store = store
        self.project = project
        self.cache = cache if cache is not None else NullReferenceCache()
        self.resolver = ReferenceResolver(reference_type, store, project, self.cache)
        self.renderer = LinkRenderer(reference_type, store, project, self.cache, no_original_data)
        self.ignored_ancestors = IGNORED_ANCESTORS | {"blockquote"} if ignore_blockquotes else IGNORED_ANCESTORS
        self.rendered = 0

    def rewrite(self, root: etree.Element) -> etree.Element:
        """Rewrite ``root`` in place and return it."""
        if self.project is None:
            return root

        self._walk(root, ignored=root.tag in self.ignored_ancestors, inside_reference=is_reference_link(root))
        logger.debug("Rendered %d %s reference(s)", self.rendered, self.reference_type.name)
        return root

    def link_pieces(self, text: str, pattern: re.Pattern[str], link_text: str | None = None) -> list[Piece]:
        """Split ``text`` into plain strings and rendered links, in order.

        Matches that do not resolve stay inside the plain strings unchanged.
        """
        if self.project is None:
            return [text]

        pieces: list[Piece] = []
        last = 0
        for match in find_matches(text, pattern, self.reference_type.id_group):
            resolved = self.resolver.resolve(match)
            if resolved is None:
                continue
            start, end = match.span
            pieces.append(text[last:start])
            pieces.append(self.renderer.render(resolved.object, resolved.project, match, link_text))
            last = end
        pieces.append(text[last:])
        return pieces

    def object_link_filter(self, text: str, pattern: re.Pattern[str], link_text: str | None = None) -> str:
        """Replace references in ``text`` with link markup.

        ``text`` is treated as markup already: unmatched parts are kept verbatim,
        rendered links are escaped.
        """
        return "".join(
            piece if isinstance(piece, str) else piece.to_html()
            for piece in self.link_pieces(text, pattern, link_text)
        )

    # Tree walking
    def _walk(self, element: etree.Element, ignored: bool, inside_reference: bool) -> None:
        if not isinstance(element.tag, str):
            # Comments and processing instructions carry no document text
            return

        # Links spliced in from element.text below are not children to visit
        children = list(element)

        if not ignored and element.text:
            pieces = self._text_pieces(element.text)
            if pieces is not None:
                element.text = None
                self._splice(element, 0, pieces)

        for child in children:
            link_pieces = None
            if self._is_valid_link(child, inside_reference):
                link_pieces = self._link_replacement(child)
            else:
                self._walk(
                    child,
                    ignored or child.tag in self.ignored_ancestors,
                    inside_reference or is_reference_link(child),
                )

            tail_pieces = None
            if not ignored and child.tail:
                tail_pieces = self._text_pieces(child.tail)

            self._apply(element, child, link_pieces, tail_pieces)

    def _is_valid_link(self, element: etree.Element, inside_reference: bool) -> bool:
        return (
            element.tag == "a"
            and bool(element.get("href"))
            and not is_reference_link(element)
            and not inside_reference
        )

    def _text_pieces(self, text: str) -> list[Piece] | None:
        pattern = self.reference_type.patterns.short
        if pattern is None:
            return None
        return self._replacement(self.link_pieces(text, pattern))

    def _link_replacement(self, element: etree.Element) -> list[Piece] | None:
        link = unquote(element.get("href", ""))
        text = "".join(element.itertext())
        short_pattern = self.reference_type.patterns.short
        link_pattern = self.reference_type.patterns.link

        if short_pattern is not None and short_pattern.fullmatch(link):
            return self._replacement(self.link_pieces(link, short_pattern, link_text=text))

        if link_pattern is None:
            return None

        if link == text and link_pattern.match(text):
            return self._replacement(self.link_pieces(text, link_pattern))

        if link_pattern.fullmatch(link):
            return self._replacement(self.link_pieces(link, link_pattern, link_text=text))

        return None

    def _replacement(self, pieces: list[Piece]) -> list[Piece] | None:
        links = sum(1 for piece in pieces if isinstance(piece, RenderedLink))
        if not links:
            return None
        self.rendered += links
        return pieces

    # Tree mutation
    def _apply(
        self,
        parent: etree.Element,
        child: etree.Element,
        link_pieces: list[Piece] | None,
        tail_pieces: list[Piece] | None,
    ) -> None:
        if link_pieces is None and tail_pieces is None:
            return

        index = list(parent).index(child)
        if link_pieces is None:
            child.tail = None
            self._splice(parent, index + 1, tail_pieces or [])
            return

        tail = tail_pieces if tail_pieces is not None else [child.tail or ""]
        parent.remove(child)
        self._splice(parent, index, link_pieces + tail)

    def _splice(self, parent: etree.Element, index: int, pieces: list[Piece]) -> None:
        """Insert ``pieces`` into ``parent`` before position ``index``.

        Strings ahead of the first link join the text that precedes ``index``;
        later strings become the tail of the link before them.
        """
        leading: list[str] = []
        last: etree.Element | None = None
        position = index
        for piece in pieces:
            if isinstance(piece, str):
                if last is None:
                    leading.append(piece)
                elif piece:
                    last.tail = (last.tail or "") + piece
                continue
            last = piece.to_element()
            parent.insert(position, last)
            position += 1

        text = "".join(leading)
        if not text:
            return
        if index == 0:
            parent.text = (parent.text or "") + text
        else:
            previous = parent[index - 1]
            previous.tail = (previous.tail or "") + text
