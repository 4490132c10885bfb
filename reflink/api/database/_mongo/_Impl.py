"""MongoDB backend."""

from typing import Any

from pymongo import MongoClient

from .._AbstractImpl import _AbstractImpl
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Opens its own client per context; the server is pinged on open."""

    def __init__(self, database_config: DatabaseConfig, database_name: str, collection_name: str):
        if not isinstance(database_config.data, _Data):
            raise ValueError("MongoDB config data is required")
        super().__init__(database_name, collection_name)
        self.uri = database_config.data.uri
        self.timeout_ms = database_config.data.server_selection_timeout_ms
        self._client: MongoClient[Any] | None = None

    def _connect(self) -> MongoClient[Any]:
        self._client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        self._client.server_info()
        return self._client

    def _disconnect(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
