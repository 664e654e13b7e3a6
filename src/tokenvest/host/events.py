"""Event sinks."""

from dataclasses import dataclass, field
from typing import Any

import structlog

from tokenvest.core.protocols import EventSink

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PublishedEvent:
    """One published event."""

    topic: str
    payload: dict[str, Any] = field(default_factory=dict)


class EventLog:
    """Recording sink keeping every event in publication order."""

    def __init__(self) -> None:
        self.events: list[PublishedEvent] = []

    def publish(self, topic: str, payload: dict[str, Any]) -> None:
        """Record an event."""
        self.events.append(PublishedEvent(topic=topic, payload=dict(payload)))

    def by_topic(self, topic: str) -> list[PublishedEvent]:
        """Events published under topic."""
        return [e for e in self.events if e.topic == topic]

    def __len__(self) -> int:
        return len(self.events)


class LoggingEventSink:
    """Sink that writes events to the structured log."""

    def publish(self, topic: str, payload: dict[str, Any]) -> None:
        """Log an event."""
        log.info("registry_event", topic=topic, **payload)


class BufferedEventSink:
    """Sink holding events until flush() forwards them to a target."""

    def __init__(self) -> None:
        self._pending: list[PublishedEvent] = []

    def publish(self, topic: str, payload: dict[str, Any]) -> None:
        """Buffer an event."""
        self._pending.append(PublishedEvent(topic=topic, payload=dict(payload)))

    @property
    def pending(self) -> list[PublishedEvent]:
        """Buffered events, oldest first."""
        return list(self._pending)

    def flush(self, target: EventSink) -> int:
        """Forward buffered events to target.

        A failing target does not stop delivery of the remaining events.

        Returns:
            Number of events delivered.
        """
        delivered = 0
        for event in self._pending:
            try:
                target.publish(event.topic, event.payload)
                delivered += 1
            except Exception as e:
                log.warning("event_publish_failed", topic=event.topic, error=str(e))
        self._pending.clear()
        return delivered
