"""Caller identity context management.

The host binds the identity of whoever invoked the current operation; the
registry reads it back through get_caller_identity().
"""

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

from tokenvest.core.identity import Address

_caller_identity: ContextVar[Address | None] = ContextVar(
    "caller_identity",
    default=None,
)


def get_caller_identity() -> Address | None:
    """Get the identity bound to the current invocation."""
    return _caller_identity.get()


@contextmanager
def caller_context(caller: Address | None) -> Generator[None, None, None]:
    """Context manager binding the caller identity for one invocation."""
    token = _caller_identity.set(caller)
    try:
        yield
    finally:
        _caller_identity.reset(token)
