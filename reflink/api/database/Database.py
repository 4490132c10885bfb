"""Database public API."""

from importlib import import_module
from typing import Any

from ._AbstractImpl import _AbstractImpl
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig


class Database:
    """One collection, opened through the configured backend.

    The MongoDB database is ``database_config.prefix``; ``collection_name``
    picks the collection inside it.
    """

    def __init__(self, database_config: DatabaseConfig, collection_name: str):
        self.database_config = database_config
        self.collection_name = collection_name
        self._impl: _AbstractImpl | None = None

    def __enter__(self) -> "Database":
        backend_type = self.database_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(
                f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
            )
        module = import_module(f"reflink.api.database._{backend_type}._Impl")
        self._impl = module._Impl(self.database_config, self.database_config.prefix, self.collection_name)
        self._impl.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl is None:
            return False
        impl, self._impl = self._impl, None
        return impl.__exit__(exc_type, exc_val, exc_tb)

    def _require_open(self) -> _AbstractImpl:
        if self._impl is None:
            raise RuntimeError(f"Database {self.collection_name!r} is not open. Use as context manager first.")
        return self._impl

    def collection(self, collection_name: str) -> "Database":
        """Another collection of the same database, sharing this connection.

        The returned facade needs no context of its own and must not outlive this one.
        """
        other = Database(self.database_config, collection_name)
        other._impl = self._require_open().sibling(collection_name)
        return other

    def find_one(self, filter: dict[str, Any], projection: dict[str, Any] | None = None) -> dict[str, Any] | None:
        return self._require_open().find_one(filter, projection)

    def update_one(self, filter: dict[str, Any], update: dict[str, Any], upsert: bool = False) -> None:
        self._require_open().update_one(filter, update, upsert)
