"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - section: str - the section name, empty string when listing all sections
    - content: dict[str, Any] - {"sections": [...]} when listing, else the section config dict
    - config_path: str - path to the configuration file
    """

    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(..., description="Section names when listing, otherwise the section config dict")
    config_path: str = Field(..., description="Path to the configuration file")


register_output_schema("config", "show", ConfigShowOutput)
