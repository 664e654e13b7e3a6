"""FastAPI dependencies for dependency injection."""

from typing import Annotated

import structlog
from fastapi import Depends, Header, HTTPException, status

from tokenvest.config.settings import Settings, get_settings
from tokenvest.core.identity import Address, is_valid_address
from tokenvest.core.protocols import PersistentStore
from tokenvest.host.file_store import FileStore
from tokenvest.host.ledger import LocalLedger
from tokenvest.host.memory_store import InMemoryStore

log = structlog.get_logger(__name__)

SettingsDep = Annotated[Settings, Depends(get_settings)]

_ledger: LocalLedger | None = None


def build_store(settings: Settings) -> PersistentStore:
    """Create the persistent store selected by settings."""
    if settings.store_backend == "file":
        # store_path presence is guaranteed by Settings validation
        return FileStore(settings.store_path)  # type: ignore[arg-type]
    return InMemoryStore()


def get_ledger() -> LocalLedger:
    """Get the process-wide ledger, creating it on first use."""
    global _ledger
    if _ledger is None:
        settings = get_settings()
        _ledger = LocalLedger(build_store(settings))
        log.info("ledger_created", store_backend=settings.store_backend)
    return _ledger


def set_ledger(ledger: LocalLedger | None) -> None:
    """Replace the process-wide ledger (None resets it)."""
    global _ledger
    _ledger = ledger


def get_caller(
    x_caller_address: Annotated[str | None, Header()] = None,
) -> Address | None:
    """Caller identity from the X-Caller-Address header."""
    if x_caller_address is None:
        return None
    if not is_valid_address(x_caller_address):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Caller-Address is not a valid address",
        )
    return Address(x_caller_address.strip())


def require_valid_address(address: str, field: str) -> Address:
    """Validate an address taken from a request body or path."""
    if not is_valid_address(address):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} is not a valid address",
        )
    return Address(address.strip())


LedgerDep = Annotated[LocalLedger, Depends(get_ledger)]
CallerDep = Annotated[Address | None, Depends(get_caller)]
