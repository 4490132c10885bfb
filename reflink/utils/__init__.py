"""reflink utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .get_home_dir import get_home_dir
from .get_logger import get_logger

__all__ = [
    "get_home_dir",
    "get_logger",
]
