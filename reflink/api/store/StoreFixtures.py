"""Fixture file model for seeding a store."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ProjectFixture(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    path: str = Field(..., pattern=r"^[a-zA-Z0-9_.-]+/[a-zA-Z0-9_.-]+$")


class ObjectFixture(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    iid: int = Field(..., gt=0)
    project_id: int
    type: Literal["issue", "merge_request", "snippet"]
    title: str


class StoreFixtures(BaseModel):
    """Projects and objects to upsert into a store."""

    model_config = ConfigDict(extra="forbid")

    projects: list[ProjectFixture] = Field(default_factory=list)
    objects: list[ObjectFixture] = Field(default_factory=list)
