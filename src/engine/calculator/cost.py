"""Cost model.

Per-lot commission, funding-side lot cost and spread cost of a trade sized
by risk percent against the funding account's max drawdown, all scaled by
CAPITAL (the trial or final capital value).

Lot sizing factor shared by the broker-side terms:

    lot_factor = CAPITAL * (risk_percent / max_drawdown) / pips_stop
"""

from src.engine.calculator.errors import ConfigurationError
from src.engine.models.calculator import CostBreakdown, SymbolCostConfig


def require_max_drawdown(max_drawdown: float | None) -> float:
    """Validate max drawdown before it is used as a divisor.

    Raises:
        ConfigurationError: If max drawdown is missing, zero or negative.
    """
    if max_drawdown is None or max_drawdown <= 0:
        raise ConfigurationError(
            "max_drawdown",
            max_drawdown,
            f"Max drawdown must be a positive percent, got {max_drawdown!r}",
        )
    return max_drawdown


def calc_lot_factor(
    capital: float,
    risk_percent: float,
    max_drawdown: float | None,
    pips_stop: float,
) -> float:
    """Lots implied by risking risk_percent of the drawdown budget over pips_stop.

    Returns 0 when pips_stop is zero.
    """
    max_drawdown = require_max_drawdown(max_drawdown)
    if not pips_stop:
        return 0.0
    return capital * (risk_percent / max_drawdown) / pips_stop


def calc_commission_per_lot(
    capital: float,
    risk_percent: float,
    max_drawdown: float | None,
    pips_stop: float,
    broker_symbol: SymbolCostConfig,
) -> float:
    """Broker commission for the sized position.

    Formula: lot_factor * commission_per_lot / pip_value_per_lot
    """
    lot_factor = calc_lot_factor(capital, risk_percent, max_drawdown, pips_stop)
    return lot_factor * broker_symbol.commission_per_lot / broker_symbol.pip_value_per_lot


def calc_spread_cost(
    capital: float,
    risk_percent: float,
    max_drawdown: float | None,
    pips_stop: float,
    broker_symbol: SymbolCostConfig,
) -> float:
    """Broker spread cost for the sized position.

    Formula: lot_factor * spread_typical
    """
    lot_factor = calc_lot_factor(capital, risk_percent, max_drawdown, pips_stop)
    return lot_factor * broker_symbol.spread_typical


def calc_lot_in_funding(
    capital: float,
    risk_percent: float,
    max_drawdown: float | None,
    pips_stop: float,
    initial_balance: float,
    funding_symbol: SymbolCostConfig,
) -> float:
    """Commission of the mirrored lot in the funding account, in CAPITAL terms.

    Formula:
        ((initial_balance * risk_percent / pips_stop)
            * commission_per_lot / pip_value_per_lot)
        * capital / (initial_balance * max_drawdown)

    The funding-side lot is sized from the funding account's own initial
    balance and symbol configuration, then rescaled by CAPITAL.

    Returns 0 when pips_stop or the initial balance is zero.
    """
    max_drawdown = require_max_drawdown(max_drawdown)
    if not pips_stop or not initial_balance:
        return 0.0

    funding_lot_cost = (
        (initial_balance * risk_percent / pips_stop)
        * funding_symbol.commission_per_lot
        / funding_symbol.pip_value_per_lot
    )
    return funding_lot_cost * capital / (initial_balance * max_drawdown)


def calc_cost_breakdown(
    capital: float,
    risk_percent: float,
    max_drawdown: float | None,
    pips_stop: float,
    initial_balance: float,
    funding_symbol: SymbolCostConfig,
    broker_symbol: SymbolCostConfig,
) -> CostBreakdown:
    """Calculate every cost term at one CAPITAL value.

    Args:
        capital: Trial or final CAPITAL.
        risk_percent: Risk per trade in percent.
        max_drawdown: Funding account max drawdown in percent.
        pips_stop: Stop-loss distance in pips.
        initial_balance: Funding account initial balance.
        funding_symbol: Funding-side symbol configuration.
        broker_symbol: Broker-side symbol configuration.

    Returns:
        CostBreakdown; total_commission is the sum of the three terms.

    Raises:
        ConfigurationError: If max drawdown is missing or not positive.

    Example:
        >>> broker = SymbolCostConfig(commission_per_lot=3, pip_value_per_lot=10, spread_typical=1)
        >>> funding = SymbolCostConfig(commission_per_lot=2, pip_value_per_lot=10)
        >>> calc_cost_breakdown(10000, 1, 10, 20, 10000, funding, broker).total_commission
        75.0
    """
    return CostBreakdown(
        commission_per_lot=calc_commission_per_lot(
            capital, risk_percent, max_drawdown, pips_stop, broker_symbol
        ),
        lot_in_funding=calc_lot_in_funding(
            capital, risk_percent, max_drawdown, pips_stop, initial_balance, funding_symbol
        ),
        spread=calc_spread_cost(capital, risk_percent, max_drawdown, pips_stop, broker_symbol),
    )
