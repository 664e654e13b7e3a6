"""Dict-backed persistent store."""

from collections.abc import Iterator


class InMemoryStore:
    """Persistent store held in process memory.

    Values are copied on the way in so callers cannot mutate stored bytes.

    Example:
        store = InMemoryStore()
        store.set("CNT", b"1")
        assert store.get("CNT") == b"1"
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        """Get stored value by key, None if absent."""
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        self._data[key] = bytes(value)

    def keys(self) -> Iterator[str]:
        """Iterate stored keys."""
        return iter(list(self._data))

    def snapshot(self) -> dict[str, bytes]:
        """Copy of the full key space."""
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)
