"""MongoDB backend settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    model_config = ConfigDict(extra="forbid")

    uri: str = Field(..., description="MongoDB connection URI")
    server_selection_timeout_ms: int = Field(5000, gt=0, description="Wait for a reachable server, in milliseconds")

    @field_validator("uri")
    @classmethod
    def _mongodb_scheme(cls, value: str) -> str:
        if not value.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(f"database.data.uri must start with 'mongodb://' or 'mongodb+srv://' (found: {value!r})")
        return value
