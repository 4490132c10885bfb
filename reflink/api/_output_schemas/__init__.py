"""Output schemas for reflink commands.

Importing this package registers every schema with the registry.
"""

from . import config, render, store  # noqa: F401
from ._registry import get_output_schema

__all__ = ["get_output_schema"]
