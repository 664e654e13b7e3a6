"""Registry statistics route."""

from fastapi import APIRouter

from tokenvest.api.dependencies import LedgerDep
from tokenvest.data.models.stats import RegistryStats

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=RegistryStats)
def get_stats(ledger: LedgerDep) -> RegistryStats:
    """Investment count, total amount and completed count."""
    return ledger.invoke(lambda r: r.get_stats())
