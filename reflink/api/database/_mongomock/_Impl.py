"""In-memory backend on mongomock."""

import mongomock

from .._AbstractImpl import _AbstractImpl
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data

# One in-memory server per process so separate opens see the same data
_client: mongomock.MongoClient | None = None


def _shared_client() -> mongomock.MongoClient:
    global _client
    if _client is None:
        _client = mongomock.MongoClient()
    return _client


def _reset_mongomock_client() -> None:
    """Drop the shared client so the next open starts from an empty database."""
    global _client
    _client = None


class _Impl(_AbstractImpl):
    def __init__(self, database_config: DatabaseConfig, database_name: str, collection_name: str):
        if not isinstance(database_config.data, _Data):
            raise ValueError("MongoMock config data is required")
        super().__init__(database_name, collection_name)

    def _connect(self) -> mongomock.MongoClient:
        return _shared_client()
