"""Calculation Engine Layer.

Pure calculations for sizing copy trades between a propfirm (funding)
account and a broker account. Inputs are plain dataclasses built by the
input assembler; nothing here performs I/O.

Architecture:
- models/: Input and result dataclasses, enums
- calculator/: Trading calculator stages
    - inputs: Raw record normalization
    - cost: Commission per lot, lot in funding, spread
    - performance: Side P&L, remaining drawdown / objective
    - recovery: Rounding factor, recovered, objective
    - solver: Dynamic capital percent search
    - engine: Unified entry point (calc_trading_plan)
    - stats: Connection trade statistics
"""

from src.engine.calculator import (
    CalculatorError,
    ConfigurationError,
    RecordingObserver,
    assemble_inputs,
    calc_cost_breakdown,
    calc_performance,
    calc_plan,
    calc_recovery_targets,
    calc_trade_stats,
    calc_trading_plan,
    logging_observer,
    solve_capital_percent,
)
from src.engine.models import (
    BrokerAccountState,
    CalculatorInputs,
    CapitalMode,
    EngineResult,
    FundingAccountState,
    RulesConfiguration,
    SolverSettings,
    SymbolCostConfig,
    TradeRecord,
    UserInputs,
)

__all__ = [
    # Models
    "CapitalMode",
    "FundingAccountState",
    "BrokerAccountState",
    "RulesConfiguration",
    "SymbolCostConfig",
    "TradeRecord",
    "UserInputs",
    "SolverSettings",
    "CalculatorInputs",
    "EngineResult",
    # Calculator
    "assemble_inputs",
    "calc_cost_breakdown",
    "calc_performance",
    "calc_recovery_targets",
    "solve_capital_percent",
    "calc_trading_plan",
    "calc_plan",
    "calc_trade_stats",
    "logging_observer",
    "RecordingObserver",
    # Errors
    "CalculatorError",
    "ConfigurationError",
]
