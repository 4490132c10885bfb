"""Output schemas for store commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class StoreLoadOutput(BaseOutputSchema):
    """Output schema for the store load command."""

    path: str = Field(..., description="Path of the fixtures file")
    projects_loaded: int = Field(..., description="Number of projects written")
    objects_loaded: int = Field(..., description="Number of referenced objects written")


register_output_schema("store", "load", StoreLoadOutput)
