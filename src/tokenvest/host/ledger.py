"""Local ledger host.

Runs registry operations the way a ledger host does: one invocation at a
time, each bound to a caller identity, with all of its writes and events
either committed together or dropped together.
"""

import threading
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import TypeVar

import structlog

from tokenvest.core.context import caller_context
from tokenvest.core.identity import Address, truncate_address
from tokenvest.core.protocols import Clock, EventSink, PersistentStore
from tokenvest.core.registry import InvestmentRegistry
from tokenvest.host.clock import SystemClock
from tokenvest.host.events import BufferedEventSink, LoggingEventSink
from tokenvest.host.staged_store import StagedStore

log = structlog.get_logger(__name__)

T = TypeVar("T")


class LocalLedger:
    """Serializing, transactional host for an InvestmentRegistry.

    Attributes:
        store: Committed key space.
        clock: Clock handed to every invocation.
        events: Sink receiving events of committed invocations.

    Example:
        ledger = LocalLedger(InMemoryStore())
        ledger.invoke(lambda r: r.init(admin))
        with ledger.session(caller=admin) as registry:
            registry.update_investment_status(1, "completed")
    """

    def __init__(
        self,
        store: PersistentStore,
        clock: Clock | None = None,
        events: EventSink | None = None,
    ) -> None:
        self.store = store
        self.clock = clock or SystemClock()
        self.events = events or LoggingEventSink()
        self._lock = threading.RLock()
        self._invocations = 0

    @contextmanager
    def session(self, caller: Address | None = None) -> Generator[InvestmentRegistry, None, None]:
        """Open one invocation.

        Yields a registry over a staged view of the store. Leaving the block
        normally commits staged writes and then publishes buffered events;
        leaving it with an exception drops both and re-raises.

        Args:
            caller: Identity the registry sees as the current caller.
        """
        with self._lock:
            self._invocations += 1
            invocation = self._invocations
            staged = StagedStore(self.store)
            buffered = BufferedEventSink()

            with caller_context(caller):
                try:
                    yield InvestmentRegistry(staged, self.clock, buffered)
                except Exception as e:
                    log.debug(
                        "ledger_invocation_aborted",
                        invocation=invocation,
                        caller=truncate_address(caller),
                        error_type=type(e).__name__,
                        dropped_keys=len(staged.pending_keys),
                    )
                    staged.discard()
                    raise

            written = staged.commit()
            published = buffered.flush(self.events)
            log.debug(
                "ledger_invocation_committed",
                invocation=invocation,
                caller=truncate_address(caller),
                keys_written=written,
                events_published=published,
            )

    def invoke(
        self,
        operation: Callable[[InvestmentRegistry], T],
        caller: Address | None = None,
    ) -> T:
        """Run one operation in its own session and return its result."""
        with self.session(caller=caller) as registry:
            return operation(registry)
