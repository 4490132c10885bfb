"""Output schemas for render commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RenderOutput(BaseOutputSchema):
    """Output schema for the render command."""

    path: str = Field(..., description="Path of the rendered source file")
    project: str = Field(..., description="Ambient project path, empty string if none")
    references: dict[str, int] = Field(..., description="Rendered reference count per reference type")
    html: str = Field(..., description="Rendered HTML")


register_output_schema("render", "render", RenderOutput)
