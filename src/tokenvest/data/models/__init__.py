"""Pydantic models for registry records, requests and events."""

from tokenvest.data.models.events import (
    InvestmentCreatedEvent,
    InvestmentStatusChangedEvent,
)
from tokenvest.data.models.investment import (
    Investment,
    InvestmentCreated,
    InvestmentCreateRequest,
    InvestmentStatus,
    StatusUpdateRequest,
    parse_status,
)
from tokenvest.data.models.stats import RegistryStats
from tokenvest.data.models.token import TokenConfig, default_token_config

__all__ = [
    "Investment",
    "InvestmentCreateRequest",
    "InvestmentCreated",
    "InvestmentCreatedEvent",
    "InvestmentStatus",
    "InvestmentStatusChangedEvent",
    "RegistryStats",
    "StatusUpdateRequest",
    "TokenConfig",
    "default_token_config",
    "parse_status",
]
