"""Database section of the reflink configuration."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData

# Backend name -> settings model; the only place backends are enumerated
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}


class DatabaseConfig(BaseModel):
    """Where the store keeps projects and objects.

    ``data`` is validated against the settings model of the backend named by
    ``type``.
    """

    type: str = Field(..., description="Backend name, one of the registry keys")
    prefix: str = Field(..., description="Database name that holds the reflink collections")
    data: BaseModel = Field(..., description="Backend-specific settings")

    @model_validator(mode="before")
    @classmethod
    def _backend_data(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            raise ValueError(f"database config must be a dict, got {type(values).__name__}")

        backend = values.get("type")
        if not backend:
            raise ValueError("database.type is required")
        settings_model = _BACKEND_REGISTRY.get(backend)
        if settings_model is None:
            raise ValueError(f"Unknown backend type: {backend!r} (supported: {list(_BACKEND_REGISTRY)})")

        data = values.get("data", {})
        if isinstance(data, dict):
            values = {**values, "data": settings_model(**data)}
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Dump with ``data`` serialized by its concrete settings model."""
        dumped = super().model_dump(**kwargs)
        dumped["data"] = self.data.model_dump(**kwargs)
        return dumped
