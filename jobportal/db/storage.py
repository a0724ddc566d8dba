"""
Storage backends - string-keyed stores of string values.

This is the persistence shim under the document store: every collection is
a single JSON blob saved under one key, read and rewritten as a whole.

Backends:
- JsonFileStorage: one file per key in a data directory (default)
- MongoStorage:    one {"_id": key, "value": str} document per key
- MemoryStorage:   plain dict, for tests and throwaway runs
"""

import os
import tempfile
from typing import Dict, Optional

from pymongo.collection import Collection

from jobportal.core.config import get_settings
from jobportal.core.log import get_logger

logger = get_logger(__name__)


class Storage:
    """Interface shared by all backends."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def ping(self) -> bool:
        return True


class MemoryStorage(Storage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(Storage):
    """
    Stores each key as <data_dir>/<key>.json.

    Writes go to a temp file in the same directory and are moved into place
    with os.replace, so a reader never sees a half-written blob.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        os.makedirs(self.data_dir, exist_ok=True)

    def _path(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self._path(key))
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if os.path.exists(path):
            os.remove(path)

    def ping(self) -> bool:
        return os.path.isdir(self.data_dir) and os.access(self.data_dir, os.W_OK)


class MongoStorage(Storage):
    def __init__(self, collection: Collection):
        self.collection = collection

    def get_item(self, key: str) -> Optional[str]:
        doc = self.collection.find_one({"_id": key})
        if doc is None:
            return None
        return doc.get("value")

    def set_item(self, key: str, value: str) -> None:
        self.collection.update_one(
            {"_id": key},
            {"$set": {"value": value}},
            upsert=True
        )

    def remove_item(self, key: str) -> None:
        self.collection.delete_one({"_id": key})

    def ping(self) -> bool:
        from jobportal.db.mongodb import check_mongo_connection
        return check_mongo_connection()


def create_storage(backend: str) -> Storage:
    """Build a storage backend by name."""
    settings = get_settings()
    if backend == "file":
        return JsonFileStorage(settings.data_dir)
    if backend == "mongo":
        from jobportal.db.mongodb import get_collection
        return MongoStorage(get_collection())
    if backend == "memory":
        return MemoryStorage()
    raise ValueError(f"Unknown storage backend: {backend!r}")


# Singleton instance
_storage: Storage = None


def get_storage() -> Storage:
    """Get or create the configured storage backend (singleton pattern)"""
    global _storage
    if _storage is None:
        backend = get_settings().storage_backend
        _storage = create_storage(backend)
        logger.info("Using %s storage backend", backend)
    return _storage
