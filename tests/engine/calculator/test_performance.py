"""Tests for the performance model."""

import pytest

from src.engine.calculator.performance import (
    calc_performance,
    calc_remaining_drawdown_percent,
    calc_remaining_objective_percent,
    calc_trades_pnl,
)
from src.engine.models.calculator import TradeRecord


class TestTradesPnl:
    """Tests for side P&L aggregation."""

    def test_empty(self):
        assert calc_trades_pnl([]) == 0.0
        assert calc_trades_pnl(None) == 0.0

    def test_sum_with_costs(self):
        trades = [
            TradeRecord(net_profit=100, commission=-5, swap=-1),
            TradeRecord(net_profit=-40, commission=-5, swap=0),
        ]
        # (100 - 5 - 1) + (-40 - 5)
        assert calc_trades_pnl(trades) == pytest.approx(49.0)

    def test_commission_sign_normalized(self):
        """+5 and -5 commission contribute identically."""
        positive = calc_trades_pnl([TradeRecord(net_profit=100, commission=5)])
        negative = calc_trades_pnl([TradeRecord(net_profit=100, commission=-5)])
        assert positive == negative == pytest.approx(95.0)

    def test_swap_sign_normalized(self):
        positive = calc_trades_pnl([TradeRecord(net_profit=10, swap=2.5)])
        negative = calc_trades_pnl([TradeRecord(net_profit=10, swap=-2.5)])
        assert positive == negative == pytest.approx(7.5)

    def test_trade_record_stores_costs_negative(self):
        trade = TradeRecord(net_profit=10, commission=5, swap=1)
        assert trade.commission == -5
        assert trade.swap == -1


class TestRemainingPercents:
    """Tests for remaining drawdown / objective."""

    def test_no_pnl(self):
        assert calc_remaining_drawdown_percent(10, 0, 10000) == pytest.approx(10.0)
        assert calc_remaining_objective_percent(8, 0, 10000) == pytest.approx(8.0)

    def test_profit(self):
        # +200 on 10k = 2%
        assert calc_remaining_drawdown_percent(10, 200, 10000) == pytest.approx(8.0)
        assert calc_remaining_objective_percent(8, 200, 10000) == pytest.approx(6.0)

    def test_loss(self):
        # -300 on 10k = -3%
        assert calc_remaining_drawdown_percent(10, -300, 10000) == pytest.approx(13.0)
        assert calc_remaining_objective_percent(8, -300, 10000) == pytest.approx(11.0)

    @pytest.mark.parametrize("initial_balance", [0, -100])
    def test_no_initial_balance_falls_back(self, initial_balance):
        assert calc_remaining_drawdown_percent(10, 500, initial_balance) == 10
        assert calc_remaining_objective_percent(8, 500, initial_balance) == 8


class TestPerformance:
    """Tests for the combined performance summary."""

    def test_summary(self):
        propfirm = [TradeRecord(net_profit=150, commission=-6), TradeRecord(net_profit=-20, commission=4)]
        broker = [TradeRecord(net_profit=-45, commission=-1.2)]

        summary = calc_performance(propfirm, broker, 10, 8, 10000)

        # 144 + (-24) = 120 -> 1.2%
        assert summary.total_propfirm_pnl == pytest.approx(120.0)
        assert summary.total_broker_pnl == pytest.approx(-46.2)
        assert summary.remaining_drawdown_percent == pytest.approx(8.8)
        assert summary.remaining_objective_percent == pytest.approx(6.8)

    def test_empty_trades(self):
        summary = calc_performance([], [], 10, 8, 10000)
        assert summary.total_propfirm_pnl == 0.0
        assert summary.total_broker_pnl == 0.0
        assert summary.remaining_drawdown_percent == 10
        assert summary.remaining_objective_percent == 8
