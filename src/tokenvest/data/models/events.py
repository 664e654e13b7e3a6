"""Registry event payloads."""

from pydantic import BaseModel

from tokenvest.data.models.investment import InvestmentStatus


class InvestmentCreatedEvent(BaseModel):
    """Published after an investment is recorded."""

    investment_id: int
    buyer: str
    token_id: str
    amount: int


class InvestmentStatusChangedEvent(BaseModel):
    """Published after an investment status is replaced."""

    investment_id: int
    status: InvestmentStatus
