"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter

from tokenvest.api.dependencies import LedgerDep
from tokenvest.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(ledger: LedgerDep) -> dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        dict with status, version, store backend and whether the registry
        has been initialized.
    """
    settings = get_settings()
    initialized = ledger.invoke(lambda r: r.state.get_admin() is not None)

    return {
        "status": "ok",
        "version": settings.app_version,
        "store_backend": settings.store_backend,
        "registry_initialized": initialized,
    }
