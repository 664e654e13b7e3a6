"""Investment registry.

Records investments against the configured token, allocates investment ids,
tracks status and answers aggregate queries.

Every operation reads what it needs through RegistryState, validates, then
writes. Validation failures raise before the first write, so a failed call
leaves the store untouched. Atomicity of the writes themselves belongs to
the host (see tokenvest.host.ledger).
"""

from collections.abc import Callable
from typing import Any

import structlog
from pydantic import BaseModel

from tokenvest.constants.registry import (
    INVESTMENT_CREATED_TOPIC,
    INVESTMENT_STATUS_TOPIC,
)
from tokenvest.core.context import get_caller_identity
from tokenvest.core.exceptions import (
    ConfigMissingError,
    InvalidAmountError,
    NotFoundError,
)
from tokenvest.core.identity import Address, truncate_address
from tokenvest.core.protocols import Clock, EventSink, PersistentStore
from tokenvest.core.registry.aggregation import (
    compute_stats,
    filter_by_buyer,
    token_total,
)
from tokenvest.core.registry.authorization import require_admin
from tokenvest.core.registry.state import RegistryState
from tokenvest.data.models.events import (
    InvestmentCreatedEvent,
    InvestmentStatusChangedEvent,
)
from tokenvest.data.models.investment import (
    Investment,
    InvestmentStatus,
    parse_status,
)
from tokenvest.data.models.stats import RegistryStats
from tokenvest.data.models.token import TokenConfig, default_token_config

log = structlog.get_logger(__name__)

CallerProvider = Callable[[], Address | None]


class InvestmentRegistry:
    """Registry of investments for a single tokenized asset.

    Attributes:
        state: Typed accessors over the injected store.

    Example:
        registry = InvestmentRegistry(InMemoryStore(), FixedClock(0), EventLog())
        registry.init(admin)
        investment_id = registry.create_investment(buyer, "EVCHARGER001", 50_000_000)
    """

    def __init__(
        self,
        store: PersistentStore,
        clock: Clock,
        events: EventSink,
        caller: CallerProvider = get_caller_identity,
    ) -> None:
        """Initialize registry over host collaborators.

        Args:
            store: Persistent key-value store, the single source of truth.
            clock: Ledger clock used for investment timestamps.
            events: Sink for creation and status-change events.
            caller: Returns the identity of the current caller.
        """
        self.state = RegistryState(store)
        self._clock = clock
        self._events = events
        self._caller = caller

    # Initialization & admin

    def init(self, admin: Address) -> None:
        """Set the admin and install the default TokenConfig.

        Calling init again overwrites admin and config; the counter and
        investment history are left as they are.
        """
        previous = self.state.get_admin()
        if previous is not None:
            log.warning(
                "registry_reinitialized",
                previous_admin=truncate_address(previous),
                new_admin=truncate_address(admin),
                next_id=self.state.get_next_id(),
            )

        self.state.set_admin(admin)
        self.state.set_token_config(default_token_config())

        log.info("registry_initialized", admin=truncate_address(admin))

    def get_admin(self) -> Address:
        """Get the admin address.

        Raises:
            NotFoundError: If the registry was never initialized.
        """
        admin = self.state.get_admin()
        if admin is None:
            raise NotFoundError("admin")
        return admin

    # Token configuration

    def update_token_info(
        self,
        token_id: str,
        name: str,
        apy_basis_points: int,
        total_value_locked: int,
        min_investment: int,
        max_investment: int,
    ) -> TokenConfig:
        """Replace the TokenConfig wholesale (admin only).

        The new bounds are not checked against each other or against
        existing investments.

        Returns:
            The stored TokenConfig.

        Raises:
            NotFoundError: If the registry was never initialized.
            NotAuthorizedError: If the caller is not the admin.
        """
        require_admin(self.state, self._caller())

        config = TokenConfig(
            id=token_id,
            name=name,
            apy_basis_points=apy_basis_points,
            total_value_locked=total_value_locked,
            min_investment=min_investment,
            max_investment=max_investment,
        )
        self.state.set_token_config(config)

        if config.min_investment > config.max_investment:
            log.warning(
                "token_config_empty_band",
                min_investment=config.min_investment,
                max_investment=config.max_investment,
            )

        log.info(
            "token_config_updated",
            token_id=config.id,
            apy_basis_points=config.apy_basis_points,
            min_investment=config.min_investment,
            max_investment=config.max_investment,
        )
        return config

    def get_token_info(self) -> TokenConfig:
        """Get the current TokenConfig.

        Raises:
            NotFoundError: If no TokenConfig has been installed.
        """
        config = self.state.get_token_config()
        if config is None:
            raise NotFoundError("token_config")
        return config

    # Investments

    def create_investment(self, buyer: Address, token_id: str, amount: int) -> int:
        """Record a new investment and return its id.

        Args:
            buyer: Contributor address.
            token_id: Asset identifier (not checked against the TokenConfig id).
            amount: Amount in micro-units.

        Returns:
            The allocated investment id.

        Raises:
            ConfigMissingError: If no TokenConfig has been installed.
            InvalidAmountError: If amount is not an integer or is outside
                [min_investment, max_investment].
        """
        config = self.state.get_token_config()
        if config is None:
            raise ConfigMissingError()

        # bool is an int subclass but never a valid amount
        is_integer = isinstance(amount, int) and not isinstance(amount, bool)
        if not is_integer or not config.accepts(amount):
            log.info(
                "investment_rejected_amount",
                buyer=truncate_address(buyer),
                amount=amount,
                min_investment=config.min_investment,
                max_investment=config.max_investment,
            )
            raise InvalidAmountError(amount, config.min_investment, config.max_investment)

        investment_id = self.state.get_next_id()
        investment = Investment(
            id=investment_id,
            buyer=buyer,
            token_id=token_id,
            amount=amount,
            timestamp=self._clock.now(),
            status=InvestmentStatus.PENDING,
        )

        self.state.put_investment(investment)
        self.state.set_next_id(investment_id + 1)

        self._emit(
            INVESTMENT_CREATED_TOPIC,
            InvestmentCreatedEvent(
                investment_id=investment_id,
                buyer=buyer,
                token_id=token_id,
                amount=amount,
            ),
        )

        log.info(
            "investment_created",
            investment_id=investment_id,
            buyer=truncate_address(buyer),
            token_id=token_id,
            amount=amount,
        )
        return investment_id

    def get_investment(self, investment_id: int) -> Investment:
        """Get one investment.

        Raises:
            NotFoundError: If no investment has this id.
        """
        investment = self.state.get_investment(investment_id)
        if investment is None:
            raise NotFoundError("investment", investment_id)
        return investment

    def update_investment_status(
        self, investment_id: int, status: InvestmentStatus | str
    ) -> Investment:
        """Replace an investment's status (admin only).

        Any status may follow any other, including reopening a completed or
        failed investment.

        Returns:
            The updated investment.

        Raises:
            InvalidStatusError: If status is not a known status.
            NotFoundError: If the registry was never initialized or the id is unknown.
            NotAuthorizedError: If the caller is not the admin.
        """
        new_status = parse_status(status)
        require_admin(self.state, self._caller())

        investment = self.get_investment(investment_id)
        previous = investment.status

        if previous.is_terminal and previous != new_status:
            log.warning(
                "investment_status_reopened",
                investment_id=investment_id,
                previous_status=previous.value,
                new_status=new_status.value,
            )

        updated = investment.model_copy(update={"status": new_status})
        self.state.put_investment(updated)

        self._emit(
            INVESTMENT_STATUS_TOPIC,
            InvestmentStatusChangedEvent(investment_id=investment_id, status=new_status),
        )

        log.info(
            "investment_status_updated",
            investment_id=investment_id,
            previous_status=previous.value,
            new_status=new_status.value,
        )
        return updated

    # Queries

    def get_all_investments(self) -> list[Investment]:
        """Every investment in creation order."""
        return list(self.state.iter_investments())

    def get_buyer_investments(self, buyer: Address) -> list[Investment]:
        """Investments made by buyer, in creation order."""
        return filter_by_buyer(self.state.iter_investments(), buyer)

    def get_token_total_investments(self, token_id: str) -> int:
        """Sum of completed investment amounts for token_id."""
        return token_total(self.state.iter_investments(), token_id)

    def get_stats(self) -> RegistryStats:
        """Investment count, total amount and completed count."""
        return compute_stats(self.state.iter_investments())

    # Events

    def _emit(self, topic: str, event: BaseModel) -> None:
        """Publish an event; a failing sink never fails the operation."""
        payload: dict[str, Any] = event.model_dump(mode="json")
        try:
            self._events.publish(topic, payload)
        except Exception as e:
            log.warning("event_publish_failed", topic=topic, error=str(e))
