"""JSON-file persistent store.

The whole key space is kept in memory and rewritten to disk on flush().
Values are base64 encoded so arbitrary bytes survive the JSON round trip.

File format:
    {"version": 1, "entries": {"<key>": "<base64 value>", ...}}
"""

import base64
import binascii
import contextlib
import json
import os
import tempfile
from pathlib import Path

import structlog

from tokenvest.core.exceptions import StoreError

log = structlog.get_logger(__name__)

FILE_FORMAT_VERSION = 1


class FileStore:
    """Persistent store backed by a single JSON file.

    Attributes:
        path: Location of the JSON file.

    Example:
        store = FileStore("/var/lib/tokenvest/registry.json")
        store.set("CNT", b"1")
        store.flush()
    """

    def __init__(self, path: str | Path) -> None:
        """Open the store, loading existing entries if the file exists.

        Args:
            path: JSON file location; parent directories are created on flush.

        Raises:
            StoreError: If the file exists but cannot be read or decoded.
        """
        self.path = Path(path)
        self._data: dict[str, bytes] = self._load()
        # Contents of the file as last loaded or written
        self._persisted: dict[str, bytes] = dict(self._data)
        self._dirty = False
        log.debug("file_store_opened", path=str(self.path), keys=len(self._data))

    def _load(self) -> dict[str, bytes]:
        if not self.path.exists():
            return {}

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StoreError(f"FileStore: cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreError(f"FileStore: {self.path} is not valid JSON") from e

        if not isinstance(raw, dict) or raw.get("version") != FILE_FORMAT_VERSION:
            raise StoreError(f"FileStore: unsupported file format in {self.path}")

        entries = raw.get("entries", {})
        try:
            return {key: base64.b64decode(value, validate=True) for key, value in entries.items()}
        except (binascii.Error, TypeError, AttributeError) as e:
            raise StoreError(f"FileStore: corrupt entry in {self.path}") from e

    def get(self, key: str) -> bytes | None:
        """Get stored value by key, None if absent."""
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        """Store value under key; persisted on the next flush()."""
        self._data[key] = bytes(value)
        self._dirty = True

    def flush(self) -> None:
        """Write all entries to disk atomically (temp file + rename).

        If the write fails, unflushed changes are dropped and the store
        goes back to the contents of the file on disk.

        Raises:
            StoreError: If the file cannot be written.
        """
        if not self._dirty:
            return

        payload = {
            "version": FILE_FORMAT_VERSION,
            "entries": {
                key: base64.b64encode(value).decode("ascii")
                for key, value in self._data.items()
            },
        }

        tmp_path: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=self.path.name, suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_path)
            self._data = dict(self._persisted)
            self._dirty = False
            log.error("file_store_flush_failed", path=str(self.path), error=str(e))
            raise StoreError(f"FileStore: cannot write {self.path}: {e}") from e

        self._persisted = dict(self._data)
        self._dirty = False
        log.debug("file_store_flushed", path=str(self.path), keys=len(self._data))
