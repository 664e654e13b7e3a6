"""Shared pytest fixtures for TokenVest tests.

This module provides fixtures for:
- Host collaborators (store, clock, event log) for the registry
- Registries and ledgers, fresh or already initialized
- Test data factories and addresses

Usage:
    def test_something(initialized_registry, buyer_address):
        investment_id = initialized_registry.create_investment(
            buyer_address, "EVCHARGER001", 50_000_000
        )
        assert investment_id == 1
"""

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from tests.factories.investment import InvestmentFactory, generate_valid_address
from tests.factories.token import TokenConfigFactory
from tests.support.helpers import START_TIME
from tokenvest.api.dependencies import set_ledger
from tokenvest.config import get_settings
from tokenvest.core.context import caller_context
from tokenvest.core.registry import InvestmentRegistry
from tokenvest.host.clock import FixedClock
from tokenvest.host.events import EventLog
from tokenvest.host.ledger import LocalLedger
from tokenvest.host.memory_store import InMemoryStore

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    load_dotenv()

    os.environ.setdefault("TOKENVEST_ENV", "test")
    os.environ["STORE_BACKEND"] = "memory"
    os.environ.pop("REGISTRY_ADMIN", None)
    get_settings.cache_clear()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def investment_factory() -> type[InvestmentFactory]:
    """Provide investment factory for creating test investments."""
    return InvestmentFactory


@pytest.fixture
def token_config_factory() -> type[TokenConfigFactory]:
    """Provide token config factory for creating test configs."""
    return TokenConfigFactory


@pytest.fixture
def admin_address() -> str:
    """Address used as registry admin."""
    return generate_valid_address()


@pytest.fixture
def buyer_address() -> str:
    """Address used as an investor."""
    return generate_valid_address()


@pytest.fixture
def other_address() -> str:
    """Address that is neither admin nor the main buyer."""
    return generate_valid_address()


# =============================================================================
# Host Fixtures
# =============================================================================


@pytest.fixture
def store() -> InMemoryStore:
    """Empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def clock() -> FixedClock:
    """Fixed clock starting at a known timestamp."""
    return FixedClock(START_TIME)


@pytest.fixture
def event_log() -> EventLog:
    """Recording event sink."""
    return EventLog()


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def registry(store: InMemoryStore, clock: FixedClock, event_log: EventLog) -> InvestmentRegistry:
    """Uninitialized registry over the shared store, clock and event log."""
    return InvestmentRegistry(store, clock, event_log)


@pytest.fixture
def initialized_registry(
    registry: InvestmentRegistry, admin_address: str
) -> InvestmentRegistry:
    """Registry initialized with admin_address and the default token config."""
    registry.init(admin_address)
    return registry


@pytest.fixture
def as_admin(admin_address: str) -> Generator[None, None, None]:
    """Bind admin_address as the caller for the duration of the test."""
    with caller_context(admin_address):
        yield


@pytest.fixture
def ledger(store: InMemoryStore, clock: FixedClock, event_log: EventLog) -> LocalLedger:
    """Local ledger over the shared store, clock and event log."""
    return LocalLedger(store, clock, event_log)


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def api_ledger() -> Generator[LocalLedger, None, None]:
    """Fresh ledger installed as the process-wide ledger for one test."""
    ledger = LocalLedger(InMemoryStore(), FixedClock(START_TIME), EventLog())
    set_ledger(ledger)
    yield ledger
    set_ledger(None)


@pytest.fixture
def client(api_ledger: LocalLedger) -> TestClient:
    """Test client over an app bound to api_ledger (lifespan not run)."""
    from tokenvest.main import create_app

    return TestClient(create_app())


@pytest.fixture
def initialized_client(client: TestClient, admin_address: str) -> TestClient:
    """Test client whose registry has been initialized with admin_address."""
    response = client.post("/api/registry/init", json={"admin": admin_address})
    assert response.status_code == 200
    return client
