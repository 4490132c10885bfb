"""Collection operations shared by the pymongo-compatible backends."""

import copy
from abc import ABC, abstractmethod
from typing import Any

from pymongo.collection import Collection


class _AbstractImpl(ABC):
    """One collection of one database, opened by a backend-specific client.

    Backends supply the client; the collection operations are the same for
    every pymongo-compatible driver.
    """

    def __init__(self, database_name: str, collection_name: str):
        self.database_name = database_name
        self.collection_name = collection_name
        self._collection: Collection | None = None
        self._owns_client = True

    @abstractmethod
    def _connect(self) -> Any:
        """Return a client whose ``[database][collection]`` indexing yields a collection."""

    def _disconnect(self) -> None:  # noqa: B027
        """Release the client, if the backend owns one."""

    def __enter__(self):
        self._collection = self._connect()[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._collection = None
        if self._owns_client:
            self._disconnect()
        return False

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            raise RuntimeError(f"Collection {self.database_name}.{self.collection_name} is not open")
        return self._collection

    def sibling(self, collection_name: str) -> "_AbstractImpl":
        """Another collection of the same database over this open client.

        The sibling never closes the client; the instance that opened it does.
        """
        database = self.collection.database
        other = copy.copy(self)
        other.collection_name = collection_name
        other._collection = database[collection_name]
        other._owns_client = False
        return other

    def find_one(self, filter: dict[str, Any], projection: dict[str, Any] | None = None) -> dict[str, Any] | None:
        return self.collection.find_one(filter, projection)

    def update_one(self, filter: dict[str, Any], update: dict[str, Any], upsert: bool = False) -> None:
        self.collection.update_one(filter, update, upsert=upsert)
