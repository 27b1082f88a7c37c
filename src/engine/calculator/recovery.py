"""Recovery / objective model.

Combines the cost model and the performance model into the capital that
can be recovered against the remaining drawdown ("Recuperado") and the
capital needed to reach the remaining profit objective ("Objetivo").
"""

import math

from src.engine.calculator.cost import require_max_drawdown
from src.engine.calculator.errors import ConfigurationError
from src.engine.models.calculator import RecoveryTargets


def calc_rounding_factor(remaining_objective_percent: float, risk_percent: float) -> int:
    """Number of trades at risk_percent needed to cover the remaining objective.

    Formula: ceil((remaining_objective_percent * 100) / (risk_percent * 100))

    Both percents are scaled by 100 before the division.

    Raises:
        ConfigurationError: If risk_percent is zero.

    Example:
        >>> calc_rounding_factor(8, 1)
        8
        >>> calc_rounding_factor(7.5, 2)
        4
    """
    if not risk_percent:
        raise ConfigurationError(
            "operation_risk_percent",
            risk_percent,
            "Operation risk percent must be non-zero to size the commission multiplier",
        )
    return math.ceil((remaining_objective_percent * 100) / (risk_percent * 100))


def calc_recovered(
    capital: float,
    max_drawdown: float | None,
    remaining_drawdown_percent: float,
    rounding_factor: int,
    total_commission: float,
) -> float:
    """Capital recoverable against the remaining drawdown budget.

    Formula:
        (capital / (max_drawdown * 100)) * (remaining_drawdown_percent * 100)
        - rounding_factor * total_commission
    """
    max_drawdown = require_max_drawdown(max_drawdown)
    return (capital / (max_drawdown * 100)) * (remaining_drawdown_percent * 100) - (
        rounding_factor * total_commission
    )


def calc_objective(
    capital: float,
    max_drawdown: float | None,
    remaining_objective_percent: float,
    rounding_factor: int,
    total_commission: float,
) -> float:
    """Capital needed to reach the remaining profit objective.

    Formula:
        (capital / (max_drawdown * 100)) * (remaining_objective_percent * 100)
        + rounding_factor * total_commission
    """
    max_drawdown = require_max_drawdown(max_drawdown)
    return (capital / (max_drawdown * 100)) * (remaining_objective_percent * 100) + (
        rounding_factor * total_commission
    )


def calc_recovery_targets(
    capital: float,
    max_drawdown: float | None,
    remaining_drawdown_percent: float,
    remaining_objective_percent: float,
    risk_percent: float,
    total_commission: float,
    total_broker_pnl: float,
) -> RecoveryTargets:
    """Calculate recovered, objective and projected total at one CAPITAL value.

    projected_total = total_broker_pnl + recovered is the quantity the
    capital solver searches over.

    Raises:
        ConfigurationError: If max drawdown is not positive or risk percent is zero.
    """
    rounding_factor = calc_rounding_factor(remaining_objective_percent, risk_percent)
    recovered = calc_recovered(
        capital, max_drawdown, remaining_drawdown_percent, rounding_factor, total_commission
    )
    objective = calc_objective(
        capital, max_drawdown, remaining_objective_percent, rounding_factor, total_commission
    )
    return RecoveryTargets(
        rounding_factor=rounding_factor,
        recovered=recovered,
        objective=objective,
        projected_total=total_broker_pnl + recovered,
    )
