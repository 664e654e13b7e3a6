"""Token configuration routes."""

from fastapi import APIRouter

from tokenvest.api.dependencies import CallerDep, LedgerDep
from tokenvest.data.models.token import TokenConfig

router = APIRouter(tags=["token"])


@router.get("/token", response_model=TokenConfig)
def get_token_info(ledger: LedgerDep) -> TokenConfig:
    """Get the current token configuration."""
    return ledger.invoke(lambda r: r.get_token_info())


@router.put("/token", response_model=TokenConfig)
def update_token_info(
    config: TokenConfig, ledger: LedgerDep, caller: CallerDep
) -> TokenConfig:
    """
    Replace the token configuration (admin only).

    The whole record is replaced; omitted fields are rejected by validation.
    """
    return ledger.invoke(
        lambda r: r.update_token_info(
            token_id=config.id,
            name=config.name,
            apy_basis_points=config.apy_basis_points,
            total_value_locked=config.total_value_locked,
            min_investment=config.min_investment,
            max_investment=config.max_investment,
        ),
        caller=caller,
    )


@router.get("/tokens/{token_id}/total")
def get_token_total(token_id: str, ledger: LedgerDep) -> dict[str, int | str]:
    """Sum of completed investment amounts for a token."""
    total = ledger.invoke(lambda r: r.get_token_total_investments(token_id))
    return {"token_id": token_id, "total": total}
