"""
Pytest fixtures for calculator tests.

Reference account: 10k funding account costing 10k, 10% max drawdown, 8%
profit target, 1% risk per trade over a 20 pip stop.
"""

import pytest

from src.engine.models.calculator import (
    BrokerAccountState,
    FundingAccountState,
    RulesConfiguration,
    SymbolCostConfig,
    UserInputs,
)
from src.engine.models.enums import CapitalMode


@pytest.fixture
def funding() -> FundingAccountState:
    return FundingAccountState(initial_balance=10000.0, current_balance=10000.0, account_cost=10000.0)


@pytest.fixture
def broker() -> BrokerAccountState:
    return BrokerAccountState(current_balance=2500.0)


@pytest.fixture
def rules() -> RulesConfiguration:
    return RulesConfiguration(max_drawdown=10.0, daily_drawdown=5.0, profit_target=8.0)


@pytest.fixture
def funding_symbol() -> SymbolCostConfig:
    return SymbolCostConfig(commission_per_lot=2.0, pip_value_per_lot=10.0, spread_typical=0.0)


@pytest.fixture
def broker_symbol() -> SymbolCostConfig:
    return SymbolCostConfig(commission_per_lot=3.0, pip_value_per_lot=10.0, spread_typical=1.0)


@pytest.fixture
def auto_inputs() -> UserInputs:
    return UserInputs(pips_stop=20.0, operation_risk_percent=1.0, capital_mode=CapitalMode.AUTO)


@pytest.fixture
def manual_inputs() -> UserInputs:
    return UserInputs(
        pips_stop=20.0,
        operation_risk_percent=1.0,
        capital_mode=CapitalMode.MANUAL,
        manual_capital_percent=150.0,
    )
