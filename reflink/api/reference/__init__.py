"""Reference linking: scan, resolve, cache and render object references."""

from .DocumentRewriter import DocumentRewriter, is_reference_link
from .find_matches import find_matches
from .LazyReference import LazyReference, referenced_by
from .LinkRenderer import LinkRenderer
from .reference_types import reference_types
from .ReferenceCache import NullReferenceCache, ReferenceCache
from .ReferenceExtension import ReferenceExtension
from .ReferenceMatch import ReferenceMatch
from .ReferencePattern import ReferencePattern
from .ReferenceResolver import ReferenceResolver, ResolvedReference
from .ReferenceType import ReferenceType
from .RenderedLink import RenderedLink

__all__ = [
    "DocumentRewriter",
    "LazyReference",
    "LinkRenderer",
    "NullReferenceCache",
    "ReferenceCache",
    "ReferenceExtension",
    "ReferenceMatch",
    "ReferencePattern",
    "ReferenceResolver",
    "ReferenceType",
    "RenderedLink",
    "ResolvedReference",
    "find_matches",
    "is_reference_link",
    "reference_types",
    "referenced_by",
]
