"""Reference scanner (UNO: single function)."""

import re
from collections.abc import Iterator

from .ReferenceMatch import ReferenceMatch


def find_matches(text: str, pattern: re.Pattern[str], id_group: str) -> Iterator[ReferenceMatch]:
    """Yield every non-overlapping occurrence of ``pattern`` in ``text``, left to right.

    Args:
        text: String to scan
        pattern: Compiled grammar with a named group ``id_group`` and optional
            ``project``, ``anchor`` and ``url`` groups
        id_group: Name of the group holding the numeric object id

    Yields:
        ReferenceMatch for each occurrence whose id group participated
    """
    for match in pattern.finditer(text):
        groups = match.groupdict()
        raw_id = groups.get(id_group)
        if raw_id is None:
            continue
        yield ReferenceMatch(
            text=match.group(0),
            id=int(raw_id),
            span=match.span(),
            project_token=groups.get("project"),
            anchor=groups.get("anchor"),
            url=groups.get("url"),
            groups=groups,
        )
