"""Top-level reflink configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...utils.get_home_dir import get_home_dir
from ..database.DatabaseConfig import DatabaseConfig
from .LogConfig import LogConfig
from .RenderConfig import RenderConfig


class ReflinkConfig(BaseModel):
    """Top-level configuration for reflink layers."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field(..., description="Base URL that object links are built on")
    database: DatabaseConfig
    render: RenderConfig = Field(default_factory=RenderConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError(f"base_url must start with 'http://' or 'https://' (found: {value!r})")
        return value.rstrip("/")

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on REFLINK_HOME or default to ~/.reflink."""
        return get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "ReflinkConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary for display."""
        return {
            "base_url": self.base_url,
            "database": self.database.model_dump(),
            "render": self.render.model_dump(),
            "log": self.log.model_dump(),
        }
