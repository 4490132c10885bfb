"""ReferencePattern model (UNO: single model)."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ReferencePattern:
    """Compiled grammars recognising one object type.

    ``short`` matches bare references such as ``!123`` or ``group/project#5``,
    ``link`` matches full URLs to the same kind of object. Either may be None,
    which disables that matching path.
    """

    short: re.Pattern[str] | None = None
    link: re.Pattern[str] | None = None
