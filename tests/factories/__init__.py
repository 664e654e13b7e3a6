"""Test data factories using factory_boy.

These factories generate realistic test data for TokenVest models.
"""

from tests.factories.investment import InvestmentFactory, generate_valid_address
from tests.factories.token import TokenConfigFactory

__all__ = [
    "InvestmentFactory",
    "TokenConfigFactory",
    "generate_valid_address",
]
