"""Aggregate queries over investment history.

Pure functions over an iterable of investments; each walks the input once
and preserves its order.
"""

from collections.abc import Iterable

from tokenvest.data.models.investment import Investment, InvestmentStatus
from tokenvest.data.models.stats import RegistryStats


def filter_by_buyer(investments: Iterable[Investment], buyer: str) -> list[Investment]:
    """Investments made by buyer, in input order."""
    return [inv for inv in investments if inv.buyer == buyer]


def token_total(investments: Iterable[Investment], token_id: str) -> int:
    """Sum of completed amounts for token_id; other entries contribute zero."""
    return sum(
        inv.amount
        for inv in investments
        if inv.token_id == token_id and inv.status == InvestmentStatus.COMPLETED
    )


def compute_stats(investments: Iterable[Investment]) -> RegistryStats:
    """Count, total amount and completed count from a single pass."""
    total = 0
    amount = 0
    completed = 0

    for inv in investments:
        total += 1
        amount += inv.amount
        if inv.status == InvestmentStatus.COMPLETED:
            completed += 1

    return RegistryStats(
        total_investments=total,
        total_amount=amount,
        completed_investments=completed,
    )
