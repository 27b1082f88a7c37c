"""Performance model.

Realized P&L per side of a connection and the drawdown / objective budget
still available on the funding account.
"""

from typing import Iterable

from src.engine.models.calculator import PerformanceSummary, TradeRecord


def calc_trades_pnl(trades: Iterable[TradeRecord] | None) -> float:
    """Sum net profit plus commission and swap over a list of trades.

    Commission and swap are applied as costs regardless of the sign they
    were recorded with.

    Example:
        >>> calc_trades_pnl([TradeRecord(net_profit=100, commission=5)])
        95.0
    """
    if not trades:
        return 0.0
    return sum((t.total_pnl for t in trades), 0.0)


def calc_pnl_percent(pnl: float, initial_balance: float) -> float:
    """P&L as a percent of the funding account's initial balance (0 if no balance)."""
    if initial_balance <= 0:
        return 0.0
    return (pnl / initial_balance) * 100


def calc_remaining_drawdown_percent(
    max_drawdown: float,
    propfirm_pnl: float,
    initial_balance: float,
) -> float:
    """Remaining drawdown budget in percent.

    Formula: max_drawdown - (propfirm_pnl / initial_balance) * 100
    Falls back to max_drawdown when initial_balance <= 0.
    """
    if initial_balance <= 0:
        return max_drawdown
    return max_drawdown - calc_pnl_percent(propfirm_pnl, initial_balance)


def calc_remaining_objective_percent(
    profit_target: float,
    propfirm_pnl: float,
    initial_balance: float,
) -> float:
    """Remaining profit objective in percent.

    Formula: profit_target - (propfirm_pnl / initial_balance) * 100
    Falls back to profit_target when initial_balance <= 0.
    """
    if initial_balance <= 0:
        return profit_target
    return profit_target - calc_pnl_percent(propfirm_pnl, initial_balance)


def calc_performance(
    propfirm_trades: Iterable[TradeRecord] | None,
    broker_trades: Iterable[TradeRecord] | None,
    max_drawdown: float,
    profit_target: float,
    initial_balance: float,
) -> PerformanceSummary:
    """Calculate both sides' P&L and the remaining funding-account budgets.

    Args:
        propfirm_trades: Trades of the funding account.
        broker_trades: Trades of the broker account.
        max_drawdown: Max drawdown in percent.
        profit_target: Profit target in percent.
        initial_balance: Funding account initial balance.

    Returns:
        PerformanceSummary.
    """
    propfirm_pnl = calc_trades_pnl(propfirm_trades)
    broker_pnl = calc_trades_pnl(broker_trades)

    return PerformanceSummary(
        total_propfirm_pnl=propfirm_pnl,
        total_broker_pnl=broker_pnl,
        remaining_drawdown_percent=calc_remaining_drawdown_percent(
            max_drawdown, propfirm_pnl, initial_balance
        ),
        remaining_objective_percent=calc_remaining_objective_percent(
            profit_target, propfirm_pnl, initial_balance
        ),
    )
