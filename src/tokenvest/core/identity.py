"""Address identity helpers.

The registry treats addresses as opaque, equality-comparable values. The
helpers here only cover boundary format checks and log-friendly display.
"""

from typing import NewType

Address = NewType("Address", str)

# Stellar strkey alphabet (RFC 4648 base32, upper case)
STRKEY_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# Account (G...) and contract (C...) addresses are 56 characters
STRKEY_LENGTH = 56
ADDRESS_PREFIXES = ("G", "C")


def is_valid_address(address: str | None) -> bool:
    """Validate account/contract address format without network calls.

    Args:
        address: Potential address to validate.

    Returns:
        True if address has a valid strkey shape, False otherwise.

    Example:
        >>> is_valid_address("G" + "A" * 55)
        True
        >>> is_valid_address("not-an-address")
        False
    """
    if address is None or not isinstance(address, str):
        return False

    address = address.strip()
    if len(address) != STRKEY_LENGTH:
        return False

    if not address.startswith(ADDRESS_PREFIXES):
        return False

    return all(c in STRKEY_ALPHABET for c in address)


def truncate_address(address: str | None) -> str | None:
    """Truncate an address for log output: GABC...WXYZ."""
    if address is None:
        return None
    if len(address) > 12:
        return f"{address[:4]}...{address[-4:]}"
    return address
