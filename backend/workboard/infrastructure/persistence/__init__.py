"""
Key-value persistence backends.

``build_key_value_store`` picks one from ``STORAGE_BACKEND``.
"""

from workboard.core.config import Settings
from workboard.domain.shared.base import KeyValueStore

from .json_file_store import JsonFileKeyValueStore
from .memory_store import InMemoryKeyValueStore
from .sql_store import KeyValueEntry, SqlKeyValueStore


def build_key_value_store(config: Settings) -> KeyValueStore:
    if config.STORAGE_BACKEND == "memory":
        return InMemoryKeyValueStore()
    if config.STORAGE_BACKEND == "sql":
        return SqlKeyValueStore.from_url(config.DATABASE_URL)
    return JsonFileKeyValueStore(config.STORAGE_PATH)


__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueEntry",
    "SqlKeyValueStore",
    "build_key_value_store",
]
