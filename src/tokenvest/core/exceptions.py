"""TokenVest exception hierarchy.

This module defines the base exception class and the registry error
taxonomy. Every registry operation either returns its result or raises one
of these; nothing is retried or swallowed inside the core.
"""


class TokenVestError(Exception):
    """Base exception for all TokenVest errors.

    All custom exceptions in TokenVest inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class InvalidAmountError(TokenVestError):
    """Raised when an investment amount falls outside the configured bounds.

    Attributes:
        amount: The rejected amount (micro-units).
        min_investment: Lower bound in force when the amount was checked.
        max_investment: Upper bound in force when the amount was checked.

    Example:
        raise InvalidAmountError(5_000_000, 10_000_000, 100_000_000_000)
    """

    def __init__(self, amount: int, min_investment: int, max_investment: int) -> None:
        self.amount = amount
        self.min_investment = min_investment
        self.max_investment = max_investment
        super().__init__(
            f"Amount {amount} outside allowed range "
            f"[{min_investment}, {max_investment}]"
        )


class NotAuthorizedError(TokenVestError):
    """Raised when the caller is not the registered admin.

    Attributes:
        caller: Identity that attempted the operation (None if unbound).
    """

    def __init__(self, caller: str | None) -> None:
        self.caller = caller
        super().__init__("Caller is not the registry admin")


class NotFoundError(TokenVestError):
    """Raised when a referenced admin, config or investment does not exist.

    Attributes:
        resource: Kind of record that was looked up.
        key: Lookup key, if any.

    Example:
        raise NotFoundError("investment", 42)
    """

    def __init__(self, resource: str, key: object | None = None) -> None:
        self.resource = resource
        self.key = key
        if key is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{key}' not found"
        super().__init__(message)


class ConfigMissingError(TokenVestError):
    """Raised when an investment is attempted before any TokenConfig exists."""

    def __init__(self) -> None:
        super().__init__("Token configuration has not been set; call init first")


class InvalidStatusError(TokenVestError):
    """Raised when a status value is not one of the known investment statuses.

    Attributes:
        value: The rejected raw value.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown investment status: {value!r}")


class StoreError(TokenVestError):
    """Raised when the persistent store fails or holds an undecodable record.

    Store failures are fatal for the enclosing operation.

    Example:
        raise StoreError("FileStore: permission denied")
    """

    pass


class ConfigurationError(TokenVestError):
    """Raised when application configuration is invalid or missing.

    Example:
        raise ConfigurationError("STORE_PATH is required for the file backend")
    """

    pass
