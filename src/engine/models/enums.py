"""Engine layer enumerations.

Centralized location for all enums used in the engine layer.
"""

from enum import Enum


class CapitalMode(Enum):
    """How the CAPITAL percent of the account cost is chosen."""

    AUTO = "AUTO"  # Dynamic capital solver
    MANUAL = "MANUAL"  # Trader-supplied percent

    @classmethod
    def parse(cls, value: "CapitalMode | str | None") -> "CapitalMode":
        """Parse a mode from an enum or string, defaulting to AUTO."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                return cls.AUTO
        return cls.AUTO


class TradeSide(Enum):
    """Which account of a connection a trade belongs to."""

    PROPFIRM = "propfirm"  # Funding / evaluation account
    BROKER = "broker"  # Live execution account
