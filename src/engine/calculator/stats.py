"""Connection trade statistics.

Win rate, average win/loss, profit factor and drawdown over the trades of
both sides of a connection. Trade P&L is net profit plus (negative)
commission and swap.
"""

from __future__ import annotations

from typing import Iterable

from src.engine.calculator.performance import calc_trades_pnl
from src.engine.models.calculator import TradeRecord, TradeStats


def calc_win_rate(pnls: list[float]) -> float:
    """Winning trades / trades, 0 when there are no trades."""
    if not pnls:
        return 0.0
    return sum(1 for p in pnls if p > 0) / len(pnls)


def calc_average_win(pnls: list[float]) -> float:
    wins = [p for p in pnls if p > 0]
    return sum(wins) / len(wins) if wins else 0.0


def calc_average_loss(pnls: list[float]) -> float:
    """Average losing trade as a positive number."""
    losses = [abs(p) for p in pnls if p < 0]
    return sum(losses) / len(losses) if losses else 0.0


def calc_profit_factor(pnls: list[float]) -> float | None:
    """Gross profit / gross loss. None when there are no losses."""
    gross_loss = sum(abs(p) for p in pnls if p < 0)
    if gross_loss == 0:
        return None
    return sum(p for p in pnls if p > 0) / gross_loss


def calc_max_drawdown_amount(pnls: list[float]) -> float:
    """Largest peak-to-trough drop of the cumulative P&L curve (>= 0).

    The curve starts at 0 before the first trade.

    Example:
        >>> calc_max_drawdown_amount([100, -50, -80, 200])
        130.0
    """
    equity = 0.0
    peak = 0.0
    max_drawdown = 0.0
    for pnl in pnls:
        equity += pnl
        peak = max(peak, equity)
        max_drawdown = max(max_drawdown, peak - equity)
    return max_drawdown


def _chronological(trades: list[TradeRecord]) -> list[TradeRecord]:
    # Undated trades keep their order after dated ones
    def key(trade: TradeRecord) -> tuple[int, float]:
        moment = trade.open_time or trade.created_at
        if moment is None:
            return (1, 0.0)
        return (0, moment.timestamp())

    return sorted(trades, key=key)


def calc_trade_stats(
    propfirm_trades: Iterable[TradeRecord] | None,
    broker_trades: Iterable[TradeRecord] | None,
) -> TradeStats:
    """Calculate statistics across both sides of a connection.

    Open trades are counted but excluded from win rate, averages, profit
    factor and drawdown.

    Args:
        propfirm_trades: Funding account trades.
        broker_trades: Broker account trades.

    Returns:
        TradeStats.
    """
    propfirm = list(propfirm_trades or [])
    broker = list(broker_trades or [])
    trades = propfirm + broker

    closed = [t for t in trades if not t.is_open]
    closed_pnls = [t.total_pnl for t in _chronological(closed)]

    return TradeStats(
        total_trades=len(trades),
        open_trades=len(trades) - len(closed),
        closed_trades=len(closed),
        winning_trades=sum(1 for p in closed_pnls if p > 0),
        losing_trades=sum(1 for p in closed_pnls if p < 0),
        total_pnl=calc_trades_pnl(trades),
        win_rate=calc_win_rate(closed_pnls),
        avg_win=calc_average_win(closed_pnls),
        avg_loss=calc_average_loss(closed_pnls),
        profit_factor=calc_profit_factor(closed_pnls),
        max_drawdown=calc_max_drawdown_amount(closed_pnls),
        propfirm_pnl=calc_trades_pnl(propfirm),
        broker_pnl=calc_trades_pnl(broker),
    )
