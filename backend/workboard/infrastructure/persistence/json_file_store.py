"""
JSON file key-value store.

All keys live in a single JSON object on disk. Every ``set``/``delete``
rewrites the file through a temporary sibling and ``os.replace`` so a
crash mid-write never leaves a truncated document behind.
"""

import json
import os
import tempfile
import threading
from pathlib import Path

from workboard.core.observability import get_logger
from workboard.domain.shared.base import KeyValueStore
from workboard.domain.shared.exceptions import PersistenceError

logger = get_logger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Key-value store backed by one JSON file.

    A missing file reads as empty. A file that is not a JSON object of
    strings is also read as empty (and logged), so the board reseeds
    rather than refusing to start.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._read("get", key).get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read("set", key)
            data[key] = value
            self._write("set", key, data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read("delete", key)
            if key not in data:
                return
            del data[key]
            self._write("delete", key, data)

    def _read(self, operation: str, key: str) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise PersistenceError(operation, key, str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Storage file is not valid JSON", path=str(self._path), error=str(e))
            return {}

        if not isinstance(data, dict) or not all(
            isinstance(v, str) for v in data.values()
        ):
            logger.warning("Storage file has unexpected layout", path=str(self._path))
            return {}
        return data

    def _write(self, operation: str, key: str, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(operation, key, str(e)) from e
