"""Tests for ConnectionCalculator."""

import pytest

from src.business.config.calculator_config import CalculatorConfig
from src.business.connection.calculator import ConnectionCalculator
from src.engine.calculator.errors import ConfigurationError, SymbolNotFoundError
from src.engine.calculator.trace import RecordingObserver
from src.engine.models.enums import CapitalMode


@pytest.fixture
def calculator():
    return ConnectionCalculator(CalculatorConfig())


class TestCalculate:
    """Tests for ConnectionCalculator.calculate()."""

    def test_manual_reference(self, calculator, connection, rules, propfirm_configs, broker_configs):
        result = calculator.calculate(
            connection=connection,
            rules=rules,
            propfirm_configs=propfirm_configs,
            broker_configs=broker_configs,
            symbol_id="sym-eurusd",
            user_inputs={"pipsStop": 20, "operationRiskPercent": 1, "capitalMode": "MANUAL"},
        )

        # pf: 150 - 6 - 150 - 4 = -10 ; broker: -45 + 40 = -5
        assert result.total_propfirm_pnl == pytest.approx(-10.0)
        assert result.total_broker_pnl == pytest.approx(-5.0)
        assert result.remaining_drawdown_percent == pytest.approx(10.1)
        assert result.remaining_objective_percent == pytest.approx(8.1)
        assert result.capital_mode == CapitalMode.MANUAL
        assert result.capital_value == pytest.approx(10000.0)
        assert result.total_commission == pytest.approx(75.0)
        assert result.rounding_factor == 9

    def test_auto(self, calculator, connection, rules, propfirm_configs, broker_configs):
        recorder = RecordingObserver()
        result = calculator.calculate(
            connection, rules, propfirm_configs, broker_configs, "sym-eurusd",
            {"pipsStop": 20, "operationRiskPercent": 1}, on_step=recorder,
        )
        assert result.solver is not None
        assert result.projected_total >= 10000 - 1
        assert recorder.count("solver_trial") > 0

    def test_one_sided_symbol_uses_defaults(self, calculator, connection, rules, propfirm_configs, broker_configs):
        result = calculator.calculate(
            connection, rules, propfirm_configs, broker_configs, "sym-gbpusd",
            {"pipsStop": 20, "operationRiskPercent": 1, "capitalMode": "MANUAL"},
        )
        # Funding side falls back to zero commission
        assert result.lot_in_funding == 0.0
        assert result.commission_per_lot == pytest.approx(15.0)

    def test_unknown_symbol(self, calculator, connection, rules, propfirm_configs, broker_configs):
        with pytest.raises(SymbolNotFoundError):
            calculator.calculate(connection, rules, propfirm_configs, broker_configs, "sym-nope", {})

    def test_filtered_category_not_found(self, calculator, connection, rules, propfirm_configs, broker_configs):
        with pytest.raises(SymbolNotFoundError):
            calculator.calculate(connection, rules, propfirm_configs, broker_configs, "sym-us30", {})

    def test_missing_rules(self, calculator, connection, propfirm_configs, broker_configs):
        with pytest.raises(ConfigurationError):
            calculator.calculate(
                connection, None, propfirm_configs, broker_configs, "sym-eurusd",
                {"pipsStop": 20, "operationRiskPercent": 1},
            )


class TestStatsAndOperations:
    def test_stats(self, calculator, connection):
        stats = calculator.stats(connection)
        assert stats.total_trades == 4
        assert stats.propfirm_pnl == pytest.approx(-10.0)
        assert stats.broker_pnl == pytest.approx(-5.0)

    def test_operations(self, calculator, connection):
        rows = calculator.operations(connection)
        assert [r.number for r in rows] == [1, 2]
        assert rows[0].broker_trade_id == "bk-1"
        # bk-2 created two minutes after pf-2
        assert rows[1].broker is None

    def test_operations_window_from_config(self, connection):
        calculator = ConnectionCalculator(CalculatorConfig(pair_window_seconds=300))
        rows = calculator.operations(connection)
        assert rows[1].broker_trade_id == "bk-2"

    def test_empty_connection(self, calculator):
        assert calculator.stats({}).total_trades == 0
        assert calculator.operations({}) == []
