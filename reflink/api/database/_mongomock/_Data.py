"""mongomock backend settings."""

from pydantic import BaseModel, ConfigDict


class _Data(BaseModel):
    """No settings: the in-memory server needs no address."""

    model_config = ConfigDict(extra="forbid")
