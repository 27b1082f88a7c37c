"""Tests for the cost model."""

import math

import pytest

from src.engine.calculator.cost import (
    calc_commission_per_lot,
    calc_cost_breakdown,
    calc_lot_factor,
    calc_lot_in_funding,
    calc_spread_cost,
    require_max_drawdown,
)
from src.engine.calculator.errors import ConfigurationError
from src.engine.models.calculator import SymbolCostConfig


class TestLotFactor:
    """Tests for the shared lot sizing factor."""

    def test_lot_factor(self):
        """CAPITAL * (risk / max_dd) / pips."""
        # 10000 * (1 / 10) / 20 = 50
        assert calc_lot_factor(10000, 1, 10, 20) == pytest.approx(50.0)

    def test_lot_factor_zero_pips(self):
        """Zero pips stop yields zero instead of infinity."""
        assert calc_lot_factor(10000, 1, 10, 0) == 0.0

    @pytest.mark.parametrize("max_drawdown", [0, -5, None])
    def test_lot_factor_invalid_max_drawdown(self, max_drawdown):
        """Max drawdown is a configuration error, not a zero guard."""
        with pytest.raises(ConfigurationError) as exc_info:
            calc_lot_factor(10000, 1, max_drawdown, 20)
        assert exc_info.value.field == "max_drawdown"

    def test_require_max_drawdown_passthrough(self):
        assert require_max_drawdown(7.5) == 7.5


class TestCostTerms:
    """Tests for the individual cost terms."""

    def test_commission_per_lot(self, broker_symbol):
        # 50 lots-factor * 3 / 10
        assert calc_commission_per_lot(10000, 1, 10, 20, broker_symbol) == pytest.approx(15.0)

    @pytest.mark.parametrize("pip_value", [0, 0.0, -10, float("nan")])
    def test_commission_invalid_pip_value_treated_as_one(self, pip_value):
        """A zero or negative pip value is priced as a pip value of 1."""
        symbol = SymbolCostConfig(commission_per_lot=3.0, pip_value_per_lot=pip_value)
        assert symbol.pip_value_per_lot == 1.0
        # 50 * 3 / 1
        assert calc_commission_per_lot(10000, 1, 10, 20, symbol) == pytest.approx(150.0)

    def test_spread_cost(self, broker_symbol):
        # 50 * 1
        assert calc_spread_cost(10000, 1, 10, 20, broker_symbol) == pytest.approx(50.0)

    def test_lot_in_funding(self, funding_symbol):
        # ((10000 * 1 / 20) * 2 / 10) * 10000 / (10000 * 10) = 10
        assert calc_lot_in_funding(10000, 1, 10, 20, 10000, funding_symbol) == pytest.approx(10.0)

    def test_lot_in_funding_uses_funding_balance(self, funding_symbol):
        """Funding-side term scales with CAPITAL, not with the funding balance."""
        small = calc_lot_in_funding(10000, 1, 10, 20, 5000, funding_symbol)
        large = calc_lot_in_funding(10000, 1, 10, 20, 200000, funding_symbol)
        assert small == pytest.approx(large)
        assert calc_lot_in_funding(20000, 1, 10, 20, 5000, funding_symbol) == pytest.approx(2 * small)

    def test_lot_in_funding_zero_balance(self, funding_symbol):
        assert calc_lot_in_funding(10000, 1, 10, 20, 0, funding_symbol) == 0.0


class TestCostBreakdown:
    """Tests for the combined breakdown."""

    def test_reference_breakdown(self, funding_symbol, broker_symbol):
        """Reference account at CAPITAL = 10000."""
        cost = calc_cost_breakdown(10000, 1, 10, 20, 10000, funding_symbol, broker_symbol)

        assert cost.commission_per_lot == pytest.approx(15.0)
        assert cost.lot_in_funding == pytest.approx(10.0)
        assert cost.spread == pytest.approx(50.0)
        assert cost.total_commission == pytest.approx(75.0)

    def test_breakdown_is_linear_in_capital(self, funding_symbol, broker_symbol):
        base = calc_cost_breakdown(10000, 1, 10, 20, 10000, funding_symbol, broker_symbol)
        doubled = calc_cost_breakdown(20000, 1, 10, 20, 10000, funding_symbol, broker_symbol)
        assert doubled.total_commission == pytest.approx(2 * base.total_commission)

    def test_zero_pips_all_finite(self, funding_symbol, broker_symbol):
        cost = calc_cost_breakdown(10000, 1, 10, 0, 10000, funding_symbol, broker_symbol)
        assert cost.total_commission == 0.0
        assert all(
            math.isfinite(v)
            for v in (cost.commission_per_lot, cost.lot_in_funding, cost.spread)
        )

    def test_zero_max_drawdown_rejected(self, funding_symbol, broker_symbol):
        with pytest.raises(ConfigurationError):
            calc_cost_breakdown(10000, 1, 0, 20, 10000, funding_symbol, broker_symbol)
