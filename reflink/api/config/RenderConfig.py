"""Render configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ReferenceTypeName = Literal["issue", "merge_request", "snippet"]


class RenderConfig(BaseModel):
    """Which references are linked and how the links are annotated."""

    model_config = ConfigDict(extra="forbid")

    types: list[ReferenceTypeName] = Field(
        default_factory=lambda: ["issue", "merge_request", "snippet"],
        description="Reference types to link, in processing order",
    )
    no_original_data: bool = Field(False, description="Omit data-original from rendered links")
    ignore_blockquotes: bool = Field(False, description="Leave references inside blockquotes as text")

    @field_validator("types")
    @classmethod
    def validate_types(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("render.types must not contain duplicates")
        return value
