"""Tests for the recovery / objective model."""

import pytest

from src.engine.calculator.errors import ConfigurationError
from src.engine.calculator.recovery import (
    calc_objective,
    calc_recovered,
    calc_recovery_targets,
    calc_rounding_factor,
)


class TestRoundingFactor:
    """Tests for the commission multiplier."""

    def test_exact_ratio(self):
        # ceil((8 * 100) / (1 * 100)) = 8
        assert calc_rounding_factor(8, 1) == 8

    def test_rounds_up(self):
        assert calc_rounding_factor(7.5, 2) == 4
        assert calc_rounding_factor(6.8, 1) == 7

    def test_small_numbers(self):
        # 0.3 / 0.1 is 2.9999999999999996 unscaled
        assert calc_rounding_factor(0.3, 0.1) == 3

    def test_zero_risk_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            calc_rounding_factor(8, 0)
        assert exc_info.value.field == "operation_risk_percent"


class TestRecoveredObjective:
    """Tests for recovered and objective capital."""

    def test_recovered(self):
        # (10000 / 1000) * 1000 - 8 * 75
        assert calc_recovered(10000, 10, 10, 8, 75) == pytest.approx(9400.0)

    def test_objective(self):
        # (10000 / 1000) * 800 + 8 * 75
        assert calc_objective(10000, 10, 8, 8, 75) == pytest.approx(8600.0)

    def test_zero_max_drawdown_rejected(self):
        with pytest.raises(ConfigurationError):
            calc_recovered(10000, 0, 10, 8, 75)
        with pytest.raises(ConfigurationError):
            calc_objective(10000, None, 8, 8, 75)


class TestRecoveryTargets:
    """Tests for the combined recovery targets."""

    def test_projected_total_adds_broker_pnl(self):
        targets = calc_recovery_targets(
            capital=10000,
            max_drawdown=10,
            remaining_drawdown_percent=10,
            remaining_objective_percent=8,
            risk_percent=1,
            total_commission=75,
            total_broker_pnl=-250,
        )
        assert targets.rounding_factor == 8
        assert targets.recovered == pytest.approx(9400.0)
        assert targets.objective == pytest.approx(8600.0)
        assert targets.projected_total == pytest.approx(9150.0)
