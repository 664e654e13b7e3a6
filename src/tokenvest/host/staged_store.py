"""Write-buffering store for all-or-nothing invocations."""

import structlog

from tokenvest.core.protocols import PersistentStore

log = structlog.get_logger(__name__)


class StagedStore:
    """Store view that buffers writes until commit().

    Reads see staged writes first, then the backing store. Dropping the
    instance without committing discards every staged write.

    Attributes:
        backing: Store that receives writes on commit.

    Example:
        staged = StagedStore(store)
        staged.set("CNT", b"2")
        staged.commit()
    """

    def __init__(self, backing: PersistentStore) -> None:
        self.backing = backing
        self._staged: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        """Get value by key, preferring staged writes."""
        if key in self._staged:
            return self._staged[key]
        return self.backing.get(key)

    def set(self, key: str, value: bytes) -> None:
        """Stage a write."""
        self._staged[key] = bytes(value)

    @property
    def pending_keys(self) -> list[str]:
        """Keys written since the last commit, in write order."""
        return list(self._staged)

    def commit(self) -> int:
        """Apply staged writes to the backing store.

        The backing store is flushed only when there is something to write.

        Returns:
            Number of keys written.
        """
        count = len(self._staged)
        if count == 0:
            return 0

        for key, value in self._staged.items():
            self.backing.set(key, value)
        self._staged.clear()

        flush = getattr(self.backing, "flush", None)
        if callable(flush):
            flush()

        log.debug("staged_store_committed", keys=count)
        return count

    def discard(self) -> None:
        """Drop staged writes."""
        if self._staged:
            log.debug("staged_store_discarded", keys=len(self._staged))
        self._staged.clear()
