"""Registry state accessors over a persistent store.

Every piece of registry state lives under its own store key. RegistryState
wraps one store handle and exposes one accessor pair per field; it keeps no
cache, so every read goes to the store.

Keys:
    ADMIN        JSON string, the admin address
    TOKEN        JSON object, the TokenConfig
    CNT          JSON integer, the next investment id
    INV:<id>     JSON object, one Investment
"""

from collections.abc import Iterator
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tokenvest.constants.registry import (
    ADMIN_KEY,
    COUNTER_KEY,
    FIRST_INVESTMENT_ID,
    INVESTMENT_KEY_PREFIX,
    TOKEN_KEY,
)
from tokenvest.core.exceptions import StoreError
from tokenvest.core.identity import Address
from tokenvest.core.protocols import PersistentStore
from tokenvest.data.models.investment import Investment
from tokenvest.data.models.token import TokenConfig

ModelT = TypeVar("ModelT", bound=BaseModel)
ValueT = TypeVar("ValueT")

_address_adapter: TypeAdapter[str] = TypeAdapter(str)
_counter_adapter: TypeAdapter[int] = TypeAdapter(int)


def investment_key(investment_id: int) -> str:
    """Store key for one investment record."""
    return f"{INVESTMENT_KEY_PREFIX}:{investment_id}"


class RegistryState:
    """Typed view of the registry key space.

    Attributes:
        store: Store handle all reads and writes go through.
    """

    def __init__(self, store: PersistentStore) -> None:
        self.store = store

    # Admin

    def get_admin(self) -> Address | None:
        """Get the admin address, None if never initialized."""
        raw = self.store.get(ADMIN_KEY)
        if raw is None:
            return None
        return Address(self._decode_value(_address_adapter, raw, ADMIN_KEY))

    def set_admin(self, admin: Address) -> None:
        self.store.set(ADMIN_KEY, _address_adapter.dump_json(admin))

    # Token configuration

    def get_token_config(self) -> TokenConfig | None:
        """Get the TokenConfig, None if never set."""
        raw = self.store.get(TOKEN_KEY)
        if raw is None:
            return None
        return self._decode_model(TokenConfig, raw, TOKEN_KEY)

    def set_token_config(self, config: TokenConfig) -> None:
        self.store.set(TOKEN_KEY, config.model_dump_json().encode())

    # Counter

    def get_next_id(self) -> int:
        """Get the next investment id to allocate."""
        raw = self.store.get(COUNTER_KEY)
        if raw is None:
            return FIRST_INVESTMENT_ID
        return self._decode_value(_counter_adapter, raw, COUNTER_KEY)

    def set_next_id(self, next_id: int) -> None:
        self.store.set(COUNTER_KEY, _counter_adapter.dump_json(next_id))

    # Investments

    def get_investment(self, investment_id: int) -> Investment | None:
        """Get one investment by id, None if absent."""
        key = investment_key(investment_id)
        raw = self.store.get(key)
        if raw is None:
            return None
        return self._decode_model(Investment, raw, key)

    def put_investment(self, investment: Investment) -> None:
        self.store.set(investment_key(investment.id), investment.model_dump_json().encode())

    def iter_investments(self) -> Iterator[Investment]:
        """Iterate every investment in creation (id) order.

        Each call starts a fresh scan from the first id.

        Raises:
            StoreError: If an id below the counter has no record.
        """
        for investment_id in range(FIRST_INVESTMENT_ID, self.get_next_id()):
            investment = self.get_investment(investment_id)
            if investment is None:
                raise StoreError(f"Investment record {investment_id} missing below counter")
            yield investment

    # Codecs

    @staticmethod
    def _decode_model(model: type[ModelT], raw: bytes, key: str) -> ModelT:
        try:
            return model.model_validate_json(raw)
        except PydanticValidationError as e:
            raise StoreError(f"Undecodable record under key '{key}'") from e

    @staticmethod
    def _decode_value(adapter: TypeAdapter[ValueT], raw: bytes, key: str) -> ValueT:
        try:
            return adapter.validate_json(raw)
        except PydanticValidationError as e:
            raise StoreError(f"Undecodable value under key '{key}'") from e
