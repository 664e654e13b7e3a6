"""Token configuration model.

This module defines the parameters of the single investable asset a
registry instance manages.
"""

from pydantic import BaseModel, Field

from tokenvest.constants.registry import (
    BASIS_POINTS_PER_UNIT,
    DEFAULT_APY_BASIS_POINTS,
    DEFAULT_MAX_INVESTMENT,
    DEFAULT_MIN_INVESTMENT,
    DEFAULT_TOKEN_ID,
    DEFAULT_TOKEN_NAME,
    DEFAULT_TOTAL_VALUE_LOCKED,
)


class TokenConfig(BaseModel):
    """Investable asset configuration.

    Replaced wholesale on update; never patched field by field. The
    min/max band is not cross-checked here, it is enforced when an
    investment is created.

    Attributes:
        id: Opaque asset identifier.
        name: Display name (no uniqueness constraint).
        apy_basis_points: Annual yield in basis points (1250 = 12.5%).
        total_value_locked: Declared locked value in micro-units.
        min_investment: Smallest accepted investment in micro-units.
        max_investment: Largest accepted investment in micro-units.

    Example:
        config = TokenConfig(
            id="SOLARFARM01",
            name="Solar Farm",
            apy_basis_points=900,
            total_value_locked=0,
            min_investment=1_000_000,
            max_investment=50_000_000_000,
        )
    """

    id: str = Field(description="Asset identifier")
    name: str = Field(description="Asset display name")
    apy_basis_points: int = Field(description="Annual yield in basis points")
    total_value_locked: int = Field(description="Declared locked value (micro-units)")
    min_investment: int = Field(description="Minimum investment (micro-units)")
    max_investment: int = Field(description="Maximum investment (micro-units)")

    @property
    def apy_percent(self) -> float:
        """Annual yield as a percentage, for display only."""
        return self.apy_basis_points * 100 / BASIS_POINTS_PER_UNIT

    def accepts(self, amount: int) -> bool:
        """Check whether an amount lies inside the investment band."""
        return self.min_investment <= amount <= self.max_investment


def default_token_config() -> TokenConfig:
    """Build the TokenConfig installed by registry initialization."""
    return TokenConfig(
        id=DEFAULT_TOKEN_ID,
        name=DEFAULT_TOKEN_NAME,
        apy_basis_points=DEFAULT_APY_BASIS_POINTS,
        total_value_locked=DEFAULT_TOTAL_VALUE_LOCKED,
        min_investment=DEFAULT_MIN_INVESTMENT,
        max_investment=DEFAULT_MAX_INVESTMENT,
    )
