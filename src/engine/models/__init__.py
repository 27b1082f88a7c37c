"""Engine layer data models.

Models:
    FundingAccountState: Propfirm (funding) account state
    BrokerAccountState: Broker account state
    RulesConfiguration: Propfirm drawdown / profit target rules
    SymbolCostConfig: Per-side symbol cost configuration
    TradeRecord: Trade with normalized commission and swap
    UserInputs: Trader inputs (pips stop, risk, capital mode)
    SolverSettings: Dynamic capital search bounds
    CalculatorInputs: All inputs of one calculation
    CostBreakdown: Cost model output
    PerformanceSummary: Performance model output
    RecoveryTargets: Recovery/objective model output
    SolverOutcome: Dynamic capital search result
    EngineResult: Final calculator report
    TradeStats: Connection trade statistics

Enums:
    CapitalMode: AUTO or MANUAL capital percent
    TradeSide: Propfirm or broker
"""

from src.engine.models.calculator import (
    BrokerAccountState,
    CalculatorInputs,
    CostBreakdown,
    EngineResult,
    FundingAccountState,
    PerformanceSummary,
    RecoveryTargets,
    RulesConfiguration,
    SolverOutcome,
    SolverSettings,
    SymbolCostConfig,
    TradeRecord,
    TradeStats,
    UserInputs,
)
from src.engine.models.enums import CapitalMode, TradeSide

__all__ = [
    # Inputs
    "FundingAccountState",
    "BrokerAccountState",
    "RulesConfiguration",
    "SymbolCostConfig",
    "TradeRecord",
    "UserInputs",
    "SolverSettings",
    "CalculatorInputs",
    # Outputs
    "CostBreakdown",
    "PerformanceSummary",
    "RecoveryTargets",
    "SolverOutcome",
    "EngineResult",
    "TradeStats",
    # Enums
    "CapitalMode",
    "TradeSide",
]
