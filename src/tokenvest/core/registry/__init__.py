"""Investment registry core.

Usage:
    from tokenvest.core.registry import InvestmentRegistry

    registry = InvestmentRegistry(store, clock, events)
"""

from tokenvest.core.registry.registry import InvestmentRegistry
from tokenvest.core.registry.state import RegistryState

__all__ = ["InvestmentRegistry", "RegistryState"]
