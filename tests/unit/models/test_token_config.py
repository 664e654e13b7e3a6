"""Unit tests for TokenConfig model and defaults."""

import pytest
from pydantic import ValidationError

from tokenvest.data.models.token import TokenConfig, default_token_config


class TestDefaultTokenConfig:
    """Tests for the config installed by init."""

    def test_default_values(self) -> None:
        config = default_token_config()

        assert config.id == "EVCHARGER001"
        assert config.name == "Electric Vehicle Charging Network"
        assert config.apy_basis_points == 1250
        assert config.total_value_locked == 2_400_000_000
        assert config.min_investment == 10_000_000
        assert config.max_investment == 100_000_000_000

    def test_each_call_returns_fresh_instance(self) -> None:
        assert default_token_config() is not default_token_config()
        assert default_token_config() == default_token_config()


class TestTokenConfig:
    """Tests for TokenConfig behavior."""

    def test_apy_percent(self) -> None:
        assert default_token_config().apy_percent == 12.5

    @pytest.mark.parametrize(
        ("amount", "accepted"),
        [
            (9_999_999, False),
            (10_000_000, True),
            (50_000_000, True),
            (100_000_000_000, True),
            (100_000_000_001, False),
        ],
    )
    def test_accepts_inclusive_band(self, amount: int, accepted: bool) -> None:
        assert default_token_config().accepts(amount) is accepted

    def test_inverted_band_accepts_nothing(self, token_config_factory) -> None:
        config = token_config_factory(min_investment=100, max_investment=10)
        assert config.accepts(50) is False
        assert config.accepts(100) is False
        assert config.accepts(10) is False

    def test_all_fields_required(self) -> None:
        with pytest.raises(ValidationError):
            TokenConfig(id="X", name="Missing bounds")  # type: ignore[call-arg]
