"""Host boundary protocols.

The registry consumes its host through these structural types. Concrete
implementations live in tokenvest.host and are injected by the caller.
"""

from typing import Any, Protocol


class PersistentStore(Protocol):
    """Durable key-value store scoped to one registry instance."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


class Clock(Protocol):
    """Ledger clock; successive calls never go backwards."""

    def now(self) -> int: ...


class EventSink(Protocol):
    """Append-only, fire-and-forget notification channel."""

    def publish(self, topic: str, payload: dict[str, Any]) -> None: ...
