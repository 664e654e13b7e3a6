"""Aggregate statistics model."""

from pydantic import BaseModel, Field


class RegistryStats(BaseModel):
    """Registry-wide aggregates computed from a single scan.

    Attributes:
        total_investments: Number of investments ever recorded.
        total_amount: Sum of amounts across all statuses (micro-units).
        completed_investments: Number of investments in COMPLETED status.
    """

    total_investments: int = Field(default=0, description="Investments recorded")
    total_amount: int = Field(default=0, description="Sum of all amounts")
    completed_investments: int = Field(default=0, description="Completed investments")

    def as_tuple(self) -> tuple[int, int, int]:
        """Return (count, total_amount, completed_count)."""
        return (self.total_investments, self.total_amount, self.completed_investments)
