"""Unit tests for caller identity context."""

import pytest

from tokenvest.core.context import caller_context, get_caller_identity


class TestCallerContext:
    """Tests for caller_context and get_caller_identity."""

    def test_no_caller_by_default(self) -> None:
        assert get_caller_identity() is None

    def test_binds_caller_inside_block(self, admin_address: str) -> None:
        with caller_context(admin_address):
            assert get_caller_identity() == admin_address
        assert get_caller_identity() is None

    def test_nested_contexts_restore_outer_caller(
        self, admin_address: str, buyer_address: str
    ) -> None:
        with caller_context(admin_address):
            with caller_context(buyer_address):
                assert get_caller_identity() == buyer_address
            assert get_caller_identity() == admin_address

    def test_resets_after_exception(self, admin_address: str) -> None:
        """
        Given: A bound caller
        When: The block raises
        Then: The caller is unbound afterwards
        """
        with pytest.raises(RuntimeError):
            with caller_context(admin_address):
                raise RuntimeError("boom")

        assert get_caller_identity() is None
