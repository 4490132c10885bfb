"""Python-Markdown extension that links references after inline processing."""

from __future__ import annotations

import xml.etree.ElementTree as etree

from markdown import Markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from ...utils.get_logger import get_logger
from ..store.Project import Project
from ..store.ReferenceStore import ReferenceStore
from .DocumentRewriter import DocumentRewriter
from .ReferenceCache import ReferenceCache
from .ReferenceType import ReferenceType

logger = get_logger("reference.markdown")

# Lower than "inline" (20) so links built from markdown syntax already exist
TREEPROCESSOR_PRIORITY = 15


class ReferenceTreeprocessor(Treeprocessor):
    """Runs one DocumentRewriter per reference type over the converted tree."""

    def __init__(
        self,
        md: Markdown,
        store: ReferenceStore,
        project: Project | None,
        types: list[ReferenceType],
        cache: ReferenceCache | None = None,
        ignore_blockquotes: bool = False,
        no_original_data: bool = False,
    ):
        super().__init__(md)
        self.store = store
        self.project = project
        self.types = types
        self.cache = cache
        self.ignore_blockquotes = ignore_blockquotes
        self.no_original_data = no_original_data
        self.rendered: dict[str, int] = {}

    def run(self, root: etree.Element) -> None:
        # Each conversion is its own request unless a cache was injected
        cache = self.cache if self.cache is not None else ReferenceCache()
        self.rendered = {}
        for reference_type in self.types:
            rewriter = DocumentRewriter(
                reference_type,
                self.store,
                self.project,
                cache=cache,
                ignore_blockquotes=self.ignore_blockquotes,
                no_original_data=self.no_original_data,
            )
            rewriter.rewrite(root)
            self.rendered[reference_type.name] = rewriter.rendered
        logger.debug("Reference cache stats: %s", cache.stats())


class ReferenceExtension(Extension):
    """Register reference linking with a ``markdown.Markdown`` instance.

    Example:
        ```python
        md = markdown.Markdown(extensions=[ReferenceExtension(store, project, types)])
        html = md.convert("Fixed in !42")
        ```
    """

    def __init__(
        self,
        store: ReferenceStore,
        project: Project | None,
        types: list[ReferenceType],
        cache: ReferenceCache | None = None,
        ignore_blockquotes: bool = False,
        no_original_data: bool = False,
    ):
        super().__init__()
        self.store = store
        self.project = project
        self.types = types
        self.cache = cache
        self.ignore_blockquotes = ignore_blockquotes
        self.no_original_data = no_original_data
        self.processor: ReferenceTreeprocessor | None = None

    def extendMarkdown(self, md: Markdown) -> None:
        self.processor = ReferenceTreeprocessor(
            md,
            self.store,
            self.project,
            self.types,
            cache=self.cache,
            ignore_blockquotes=self.ignore_blockquotes,
            no_original_data=self.no_original_data,
        )
        md.treeprocessors.register(self.processor, "reflink", TREEPROCESSOR_PRIORITY)

    def rendered(self) -> dict[str, int]:
        """Reference counts per type from the last conversion."""
        return dict(self.processor.rendered) if self.processor else {}
