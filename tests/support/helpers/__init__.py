"""
Test Helpers

Small shared helpers for API and registry tests.

Usage:
    from tests.support.helpers import caller_headers, START_TIME
"""

from tests.support.helpers.api_helpers import START_TIME, caller_headers, post_investment

__all__ = ["START_TIME", "caller_headers", "post_investment"]
