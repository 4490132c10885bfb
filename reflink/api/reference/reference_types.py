"""Reference grammars for issues, merge requests and snippets."""

import re

from .ReferencePattern import ReferencePattern
from .ReferenceType import ReferenceType

PROJECT_PATTERN = r"(?P<project>[a-zA-Z0-9_.-]+/[a-zA-Z0-9_.-]+)"
NOTE_ANCHOR_PATTERN = r"(?P<anchor>\#note_\d+)"

# (name, display name, prefix, route)
_TYPES: tuple[tuple[str, str, str, str], ...] = (
    ("issue", "Issue", "#", "issues"),
    ("merge_request", "Merge Request", "!", "merge_requests"),
    ("snippet", "Snippet", "$", "snippets"),
)


def _short_pattern(name: str, prefix: str) -> re.Pattern[str]:
    return re.compile(f"(?:{PROJECT_PATTERN})?{re.escape(prefix)}(?P<{name}>\\d+){NOTE_ANCHOR_PATTERN}?")


def _link_pattern(base_url: str, name: str, route: str) -> re.Pattern[str]:
    return re.compile(
        "(?P<url>"
        f"{re.escape(base_url)}"
        f"/{PROJECT_PATTERN}"
        f"/{re.escape(route)}"
        f"/(?P<{name}>\\d+)"
        r"(?P<path>(?:/[a-z0-9_=-]+)*)"
        r"(?P<query>\?[a-z0-9_=-]+(?:&[a-z0-9_=-]+)*)?"
        r"(?P<anchor>\#[a-z0-9_-]+)?"
        ")"
    )


def reference_types(base_url: str, names: list[str] | None = None) -> list[ReferenceType]:
    """Build the reference types served under ``base_url``.

    Args:
        base_url: Instance URL, e.g. ``https://git.example.com``
        names: Type names to include, in the order given. None means all.

    Raises:
        ValueError: If a requested name is unknown
    """
    base_url = base_url.rstrip("/")
    known = {entry[0]: entry for entry in _TYPES}
    selected = names if names is not None else [entry[0] for entry in _TYPES]

    types: list[ReferenceType] = []
    for name in selected:
        if name not in known:
            raise ValueError(f"Unknown reference type: {name!r} (supported: {list(known)})")
        _, display_name, prefix, route = known[name]
        types.append(
            ReferenceType(
                name=name,
                display_name=display_name,
                prefix=prefix,
                route=route,
                patterns=ReferencePattern(
                    short=_short_pattern(name, prefix),
                    link=_link_pattern(base_url, name, route),
                ),
            )
        )
    return types
