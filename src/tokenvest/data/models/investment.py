"""Investment models.

Models for recorded capital contributions and their lifecycle status.
"""

from enum import Enum

from pydantic import BaseModel, Field

from tokenvest.core.exceptions import InvalidStatusError


class InvestmentStatus(str, Enum):
    """Investment lifecycle status.

    Transitions are not restricted: an admin may move an investment between
    any two statuses, including out of COMPLETED or FAILED.
    """

    PENDING = "pending"  # Recorded, not yet settled
    COMPLETED = "completed"  # Settled, counts toward token totals
    FAILED = "failed"  # Settlement failed

    @property
    def is_terminal(self) -> bool:
        """Check if status is conventionally final."""
        return self in (InvestmentStatus.COMPLETED, InvestmentStatus.FAILED)


def parse_status(value: "InvestmentStatus | str") -> InvestmentStatus:
    """Parse a raw status value into InvestmentStatus.

    Args:
        value: Enum member or its string value (case-insensitive).

    Returns:
        Matching InvestmentStatus.

    Raises:
        InvalidStatusError: If value is not a known status.
    """
    if isinstance(value, InvestmentStatus):
        return value
    if isinstance(value, str):
        try:
            return InvestmentStatus(value.strip().lower())
        except ValueError:
            pass
    raise InvalidStatusError(value)


class Investment(BaseModel):
    """One recorded contribution.

    Owned exclusively by the registry; only status changes after creation.

    Attributes:
        id: Registry-assigned id, contiguous from 1 in creation order.
        buyer: Address of the contributor.
        token_id: Asset identifier the contribution targets.
        amount: Contributed amount in micro-units.
        timestamp: Ledger timestamp at creation.
        status: Current lifecycle status.
    """

    id: int = Field(ge=1, description="Registry-assigned investment id")
    buyer: str = Field(description="Contributor address")
    token_id: str = Field(description="Target asset identifier")
    amount: int = Field(description="Amount in micro-units")
    timestamp: int = Field(ge=0, description="Ledger timestamp at creation")
    status: InvestmentStatus = Field(default=InvestmentStatus.PENDING)


class InvestmentCreateRequest(BaseModel):
    """Request body for creating an investment."""

    buyer: str
    token_id: str
    amount: int


class InvestmentCreated(BaseModel):
    """Response body for a created investment."""

    id: int


class StatusUpdateRequest(BaseModel):
    """Request body for an investment status change.

    Kept as a plain string so unknown values reach the registry boundary
    and are rejected there with InvalidStatusError.
    """

    status: str
