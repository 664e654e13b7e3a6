"""Registry initialization and admin routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from tokenvest.api.dependencies import CallerDep, LedgerDep, require_valid_address

router = APIRouter(prefix="/registry", tags=["registry"])


class AdminBody(BaseModel):
    """Admin address payload."""

    admin: str


@router.post("/init", response_model=AdminBody)
def init_registry(body: AdminBody, ledger: LedgerDep, caller: CallerDep) -> AdminBody:
    """
    Initialize the registry with an admin and the default token config.

    Re-initializing overwrites admin and token config but keeps
    investment history.
    """
    admin = require_valid_address(body.admin, "admin")
    ledger.invoke(lambda r: r.init(admin), caller=caller)
    return AdminBody(admin=admin)


@router.get("/admin", response_model=AdminBody)
def get_admin(ledger: LedgerDep) -> AdminBody:
    """Get the registry admin address."""
    return AdminBody(admin=ledger.invoke(lambda r: r.get_admin()))
