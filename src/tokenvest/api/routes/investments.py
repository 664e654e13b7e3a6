"""Investment routes."""

from typing import Annotated

from fastapi import APIRouter, Path, status

from tokenvest.api.dependencies import CallerDep, LedgerDep, require_valid_address
from tokenvest.data.models.investment import (
    Investment,
    InvestmentCreated,
    InvestmentCreateRequest,
    StatusUpdateRequest,
)

router = APIRouter(prefix="/investments", tags=["investments"])

InvestmentIdPath = Annotated[int, Path(ge=1, description="Investment id")]


@router.post("", response_model=InvestmentCreated, status_code=status.HTTP_201_CREATED)
def create_investment(
    request: InvestmentCreateRequest, ledger: LedgerDep, caller: CallerDep
) -> InvestmentCreated:
    """
    Record a new investment.

    The amount must lie within the token's min/max investment band.
    """
    buyer = require_valid_address(request.buyer, "buyer")
    investment_id = ledger.invoke(
        lambda r: r.create_investment(buyer, request.token_id, request.amount),
        caller=caller,
    )
    return InvestmentCreated(id=investment_id)


@router.get("", response_model=list[Investment])
def list_investments(ledger: LedgerDep) -> list[Investment]:
    """All investments in creation order."""
    return ledger.invoke(lambda r: r.get_all_investments())


@router.get("/buyer/{buyer}", response_model=list[Investment])
def list_buyer_investments(buyer: str, ledger: LedgerDep) -> list[Investment]:
    """Investments made by one buyer, in creation order."""
    address = require_valid_address(buyer, "buyer")
    return ledger.invoke(lambda r: r.get_buyer_investments(address))


@router.get("/{investment_id}", response_model=Investment)
def get_investment(investment_id: InvestmentIdPath, ledger: LedgerDep) -> Investment:
    """Get one investment."""
    return ledger.invoke(lambda r: r.get_investment(investment_id))


@router.patch("/{investment_id}/status", response_model=Investment)
def update_investment_status(
    investment_id: InvestmentIdPath,
    request: StatusUpdateRequest,
    ledger: LedgerDep,
    caller: CallerDep,
) -> Investment:
    """Change an investment's status (admin only)."""
    return ledger.invoke(
        lambda r: r.update_investment_status(investment_id, request.status),
        caller=caller,
    )
