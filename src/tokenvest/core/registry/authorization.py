"""Admin authorization checks.

Both functions only read state; callers run them before any write.
"""

import structlog

from tokenvest.core.exceptions import NotAuthorizedError, NotFoundError
from tokenvest.core.identity import Address, truncate_address
from tokenvest.core.registry.state import RegistryState

log = structlog.get_logger(__name__)


def is_admin(state: RegistryState, caller: Address | None) -> bool:
    """Check whether caller is the registered admin (False if none is set)."""
    admin = state.get_admin()
    return admin is not None and caller is not None and caller == admin


def require_admin(state: RegistryState, caller: Address | None) -> Address:
    """Ensure caller is the registered admin.

    Args:
        state: Registry state to read the admin from.
        caller: Identity bound to the current invocation.

    Returns:
        The admin address.

    Raises:
        NotFoundError: If the registry was never initialized.
        NotAuthorizedError: If caller differs from the admin.
    """
    admin = state.get_admin()
    if admin is None:
        raise NotFoundError("admin")

    if caller is None or caller != admin:
        log.warning("admin_check_failed", caller=truncate_address(caller))
        raise NotAuthorizedError(caller)

    return admin
