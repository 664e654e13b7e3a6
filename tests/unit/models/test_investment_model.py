"""Unit tests for Investment model and status parsing."""

import pytest
from pydantic import ValidationError

from tokenvest.core.exceptions import InvalidStatusError
from tokenvest.data.models.investment import (
    Investment,
    InvestmentStatus,
    parse_status,
)


class TestInvestmentStatus:
    """Tests for the closed status enumeration."""

    def test_has_exactly_three_states(self) -> None:
        assert set(InvestmentStatus) == {
            InvestmentStatus.PENDING,
            InvestmentStatus.COMPLETED,
            InvestmentStatus.FAILED,
        }

    def test_values_serialize_to_lowercase_strings(self) -> None:
        assert InvestmentStatus.PENDING.value == "pending"
        assert InvestmentStatus.COMPLETED.value == "completed"
        assert InvestmentStatus.FAILED.value == "failed"

    def test_terminal_states(self) -> None:
        assert InvestmentStatus.PENDING.is_terminal is False
        assert InvestmentStatus.COMPLETED.is_terminal is True
        assert InvestmentStatus.FAILED.is_terminal is True


class TestParseStatus:
    """Tests for parse_status at the registry boundary."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("pending", InvestmentStatus.PENDING),
            ("completed", InvestmentStatus.COMPLETED),
            ("failed", InvestmentStatus.FAILED),
            ("COMPLETED", InvestmentStatus.COMPLETED),
            (" Failed ", InvestmentStatus.FAILED),
            (InvestmentStatus.PENDING, InvestmentStatus.PENDING),
        ],
    )
    def test_parses_known_statuses(self, raw: str, expected: InvestmentStatus) -> None:
        assert parse_status(raw) is expected

    @pytest.mark.parametrize("raw", ["refunded", "", "complete", None, 1])
    def test_rejects_unknown_values(self, raw: object) -> None:
        with pytest.raises(InvalidStatusError) as exc_info:
            parse_status(raw)  # type: ignore[arg-type]
        assert exc_info.value.value == raw


class TestInvestmentModel:
    """Tests for the Investment record."""

    def test_defaults_to_pending(self, buyer_address: str) -> None:
        investment = Investment(
            id=1,
            buyer=buyer_address,
            token_id="EVCHARGER001",
            amount=50_000_000,
            timestamp=1_700_000_000,
        )
        assert investment.status == InvestmentStatus.PENDING

    def test_id_must_be_positive(self, buyer_address: str) -> None:
        with pytest.raises(ValidationError):
            Investment(
                id=0,
                buyer=buyer_address,
                token_id="EVCHARGER001",
                amount=50_000_000,
                timestamp=0,
            )

    def test_json_round_trip_keeps_status(self, investment_factory) -> None:
        investment = investment_factory(completed=True)
        restored = Investment.model_validate_json(investment.model_dump_json())
        assert restored == investment
        assert restored.status is InvestmentStatus.COMPLETED

    def test_rejects_unknown_status_value(self, buyer_address: str) -> None:
        with pytest.raises(ValidationError):
            Investment(
                id=1,
                buyer=buyer_address,
                token_id="EVCHARGER001",
                amount=1,
                timestamp=0,
                status="refunded",  # type: ignore[arg-type]
            )
