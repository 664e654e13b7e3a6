"""Registry storage keys, event topics and default token parameters."""

from typing import Final

# Storage keys (one independent key per piece of registry state)
ADMIN_KEY: Final[str] = "ADMIN"
TOKEN_KEY: Final[str] = "TOKEN"
COUNTER_KEY: Final[str] = "CNT"
INVESTMENT_KEY_PREFIX: Final[str] = "INV"

# First id handed out by a fresh counter
FIRST_INVESTMENT_ID: Final[int] = 1

# Event topics
INVESTMENT_CREATED_TOPIC: Final[str] = "INVESTED"
INVESTMENT_STATUS_TOPIC: Final[str] = "INVSTAT"

# Default token installed by init (amounts in micro-units, 1 USD = 1_000_000)
MICRO_UNITS_PER_USD: Final[int] = 1_000_000
DEFAULT_TOKEN_ID: Final[str] = "EVCHARGER001"
DEFAULT_TOKEN_NAME: Final[str] = "Electric Vehicle Charging Network"
DEFAULT_APY_BASIS_POINTS: Final[int] = 1250  # 12.5%
DEFAULT_TOTAL_VALUE_LOCKED: Final[int] = 2_400 * MICRO_UNITS_PER_USD
DEFAULT_MIN_INVESTMENT: Final[int] = 10 * MICRO_UNITS_PER_USD
DEFAULT_MAX_INVESTMENT: Final[int] = 100_000 * MICRO_UNITS_PER_USD

BASIS_POINTS_PER_UNIT: Final[int] = 10_000
