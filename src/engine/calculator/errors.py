"""Calculator exceptions."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for calculator errors."""

    pass


class ConfigurationError(CalculatorError):
    """Rules or inputs make the calculation meaningless.

    Raised when max drawdown is missing or not positive, or when the
    operation risk percent is zero where it is used as a divisor.
    """

    def __init__(self, field: str, value: Any, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class SymbolNotFoundError(CalculatorError):
    """No symbol configuration on either side of the connection."""

    pass
